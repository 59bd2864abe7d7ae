"""Depth-first traversal over folders and nested cabinets."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional


def children_of(folder: Any) -> Optional[Iterable[Any]]:
    """Return the children of a composite folder, or None for a leaf."""
    return getattr(folder, "children", None)


def flatten(folders: Optional[Iterable[Any]]) -> Iterator[Any]:
    """
    Yield every folder under ``folders`` in depth-first pre-order.

    Each composite is yielded before its own children and siblings keep
    their stored order. None entries are skipped. Uses an explicit stack,
    so deep chains do not hit the recursion limit.
    """
    if folders is None:
        return
    stack: List[Iterator[Any]] = [iter(folders)]
    while stack:
        try:
            folder = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        if folder is None:
            continue
        yield folder
        children = children_of(folder)
        if children is not None:
            stack.append(iter(children))
