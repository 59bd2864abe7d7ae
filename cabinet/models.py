"""
where we store the
pydantic Data Structure classes
for folders and cabinets

"""

from pydantic import BaseModel, ConfigDict
from typing import Any, Optional, Sequence, Tuple
from enum import Enum


class NodeType(str, Enum):
    FOLDER = "folder"
    CABINET = "cabinet"


class SizeCategory(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Folder(BaseModel):
    """
    A named, sized entry of a cabinet.

    A folder with ``children`` set (even to an empty tuple) is a composite and
    its children are searched along with it. Children are not validated: any
    value with ``name`` and ``size`` (a Folder, a FileCabinet, or a plain
    object) may be one, and None entries are skipped. ``size`` is kept as given; it is
    only interpreted as a SizeCategory when compared.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    size: str
    children: Optional[Tuple[Any, ...]] = None

    @property
    def node_type(self) -> NodeType:
        return NodeType.FOLDER if self.children is None else NodeType.CABINET

    @classmethod
    def leaf(cls, name: str, size: str) -> "Folder":
        return cls(name=name, size=size)

    @classmethod
    def composite(cls, name: str, size: str, children: Optional[Sequence[Any]] = None) -> "Folder":
        return cls(name=name, size=size, children=tuple(children or ()))

    def __str__(self) -> str:
        return f"{self.name} ({self.size})"
