"""Sample folders used by the command line demo."""

from typing import List

from cabinet.models import Folder

DEMO_CABINET_NAME = "FileCabinet"
DEMO_CABINET_SIZE = "medium"

DEMO_FOLDERS = [
    ("Test1", "small"),
    ("Test2", "medium"),
    ("Test3", "small"),
    ("Test4", "medium"),
    ("Test5", "large"),
    ("Test6", "large"),
    ("Test7", "small"),
]


def demo_folders() -> List[Folder]:
    return [Folder.leaf(name, size) for name, size in DEMO_FOLDERS]


def nested_demo_folders() -> List[Folder]:
    """
    Three levels deep:
    B/
    ├── A/
    │   ├── Test1 (small)
    │   └── Test2 (medium)
    └── Test6 (large)
    Test7 (medium)
    """
    inner = Folder.composite("A", "small", [
        Folder.leaf("Test1", "small"),
        Folder.leaf("Test2", "medium"),
    ])
    middle = Folder.composite("B", "large", [
        inner,
        Folder.leaf("Test6", "large"),
    ])
    return [middle, Folder.leaf("Test7", "medium")]
