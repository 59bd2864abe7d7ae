from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Tuple
import logging

from cabinet.models import Folder, NodeType
from cabinet.tree import flatten
from cabinet.utils import InvalidSizeError, assert_allowed_size, normalize

logger = logging.getLogger(__name__)


class Cabinet(ABC):
    """
    Abstract base class for anything that answers folder queries.
    Concrete cabinets decide where their folders come from.
    """
    @abstractmethod
    def find_folder_by_name(self, name: Optional[str]) -> Optional[Folder]:
        """
        Return the first folder whose name matches ``name``, ignoring case
        and surrounding whitespace, or None.
        """

    @abstractmethod
    def find_folders_by_size(self, size: Optional[str]) -> List[Folder]:
        """
        Return every folder of the given size category (small, medium, large).
        An invalid ``size`` raises InvalidSizeError before anything is searched.
        Stored folders whose own size is invalid are skipped and a WARNING is logged.
        """

    @abstractmethod
    def count(self) -> int:
        """
        Return the number of folders, counting nested ones at every depth.
        """


class FileCabinet(Cabinet):
    """
    Cabinet over a snapshot of folders, some of which may be nested cabinets.

    Queries run over the depth-first pre-order flattening of the folders: a
    nested cabinet is a match candidate itself, and so is everything in it.
    A FileCabinet also exposes ``children``, so it can be nested in another
    FileCabinet.
    """
    def __init__(self, folders: Optional[Iterable[Any]], name: str, size: str):
        self._folders: Optional[Tuple[Any, ...]] = tuple(folders or ())
        self._name = name
        self._size = size
        logger.debug(f"FileCabinet '{name}' created with {len(self._folders)} top-level folders")

    def find_folder_by_name(self, name: Optional[str]) -> Optional[Folder]:
        target = normalize(name)
        if target is None or self._folders is None:
            return None

        for folder in flatten(self._folders):
            if normalize(folder.name) == target:
                return folder
        logger.debug(f"No folder named '{target}' in cabinet '{self._name}'")
        return None

    def find_folders_by_size(self, size: Optional[str]) -> List[Folder]:
        """
        Collect folders of ``size`` in traversal order.

        Raises InvalidSizeError for an invalid ``size`` before scanning. A
        folder whose stored size is not small, medium or large is skipped
        with a WARNING rather than failing the call.
        """
        target = assert_allowed_size(size)
        if self._folders is None:
            return []

        matches = []
        for folder in flatten(self._folders):
            try:
                folder_size = assert_allowed_size(folder.size)
            except InvalidSizeError:
                logger.warning(f"Skipping folder '{folder.name}' with invalid size {folder.size!r}")
                continue
            if folder_size == target:
                matches.append(folder)
        logger.debug(f"{len(matches)} '{target}' folders in cabinet '{self._name}'")
        return matches

    def count(self) -> int:
        if self._folders is None:
            return 0
        return sum(1 for _ in flatten(self._folders))

    def replace_folders(self, folders: Optional[Iterable[Any]]) -> None:
        """
        Replace all folders in place. None leaves the cabinet without a
        folder list, so it counts 0 and finds nothing.
        Not safe while another thread is querying; prefer with_folders().
        """
        self._folders = None if folders is None else tuple(folders)

    def with_folders(self, folders: Optional[Iterable[Any]]) -> "FileCabinet":
        """Return a new cabinet with the same name and size holding ``folders``."""
        return FileCabinet(folders, self._name, self._size)

    @property
    def folders(self) -> Tuple[Any, ...]:
        return tuple(self._folders or ())

    @property
    def children(self) -> Tuple[Any, ...]:
        return self.folders

    @property
    def node_type(self) -> NodeType:
        return NodeType.CABINET

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> str:
        return self._size

    def get_folders(self) -> Tuple[Any, ...]:
        return self.folders

    def get_name(self) -> str:
        return self._name

    def get_size(self) -> str:
        return self._size

    def __repr__(self) -> str:
        return f"FileCabinet(name={self._name!r}, size={self._size!r}, folders={len(self.folders)})"

    def __str__(self) -> str:
        return f"{self._name} ({self._size})"
