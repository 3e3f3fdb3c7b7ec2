"""A B-tree of lines kept in order of depth."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field

from .model import Line

ORDER = 22
_MAX_KEYS = ORDER - 1
_MIDDLE = (ORDER - 1) // 2


def _depth(line: Line) -> int:
    return line.z


@dataclass
class _Node:
    keys: list[Line] = field(default_factory=list)
    children: list["_Node"] = field(default_factory=list)


def _insert(node: _Node, line: Line) -> tuple[Line, _Node] | None:
    """Insert into ``node``; return the key and right half if it split."""
    pos = bisect_right(node.keys, line.z, key=_depth)
    if node.children:
        carried = _insert(node.children[pos], line)
        if carried is None:
            return None
        up_key, right = carried
        node.keys.insert(pos, up_key)
        node.children.insert(pos + 1, right)
    else:
        node.keys.insert(pos, line)
    if len(node.keys) <= _MAX_KEYS:
        return None
    up_key = node.keys[_MIDDLE]
    right = _Node(node.keys[_MIDDLE + 1 :], node.children[_MIDDLE + 1 :])
    node.keys = node.keys[:_MIDDLE]
    node.children = node.children[: _MIDDLE + 1]
    return up_key, right


def _walk(node: _Node) -> Iterator[Line]:
    if not node.children:
        yield from node.keys
        return
    for child, key in zip(node.children, node.keys):
        yield from _walk(child)
        yield key
    yield from _walk(node.children[-1])


class LineBTree:
    """Lines ordered by depth; lines of equal depth keep insertion order."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, line: Line) -> None:
        """Add ``line`` to the tree."""
        if self._root is None:
            self._root = _Node()
        carried = _insert(self._root, line)
        if carried is not None:
            up_key, right = carried
            self._root = _Node([up_key], [self._root, right])
        self._size += 1

    def __iter__(self) -> Iterator[Line]:
        if self._root is not None:
            yield from _walk(self._root)

    def __len__(self) -> int:
        return self._size