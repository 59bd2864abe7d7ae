from typing import Any, Iterable, List, Optional

from cabinet.tree import children_of


class Renderer:
    """
    Renderer takes a sequence of folders and produces printable representations:
      - render_tree(): shows the folder/cabinet hierarchy in ASCII form
      - render_folders(): lists query results, one folder per line
    """
    def __init__(self, folders: Iterable[Any]):
        self.folders = [folder for folder in folders if folder is not None]

    def render_tree(self) -> str:
        """Return an ASCII tree of the folder hierarchy."""
        return "\n".join(self._format_children(self.folders, prefix=""))

    def _format_children(self, folders: List[Any], prefix: str) -> List[str]:
        """Recursively format child folders with ASCII connectors."""
        formatted = []
        count = len(folders)
        for index, folder in enumerate(folders):
            is_last = (index == count - 1)
            connector = "└── " if is_last else "├── "
            formatted.append(f"{prefix}{connector}{self._label(folder)}")

            children = children_of(folder)
            if children:
                next_prefix = prefix + ("    " if is_last else "│   ")
                kids = [child for child in children if child is not None]
                formatted.extend(self._format_children(kids, next_prefix))
        return formatted

    def _label(self, folder: Any) -> str:
        """Format a single tree line; cabinets get a trailing slash."""
        suffix = "" if children_of(folder) is None else "/"
        return f"{folder.name}{suffix} ({folder.size})"

    @staticmethod
    def render_folder(folder: Optional[Any]) -> str:
        if folder is None:
            return "not found"
        return f"{folder.name} ({folder.size})"

    @staticmethod
    def render_folders(folders: Iterable[Any]) -> str:
        lines = [Renderer.render_folder(folder) for folder in folders]
        return "\n".join(lines) if lines else "(none)"
