"""A set of strings stored in a ternary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    char: str
    terminal: bool = False
    lo: Optional[_Node] = None
    eq: Optional[_Node] = None
    hi: Optional[_Node] = None


class TernarySearchTree:
    """String set where each node holds one character and three links.

    Removing a key only unmarks it; the tree is never trimmed. Empty keys
    are ignored.
    """

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.add(key)

    def _find(self, key: str) -> Optional[_Node]:
        node, last, i = self._root, None, 0
        while node is not None and i < len(key):
            last = node
            if key[i] < node.char:
                node = node.lo
            elif key[i] > node.char:
                node = node.hi
            else:
                node = node.eq
                i += 1
        if i < len(key) or last is None or not last.terminal:
            return None
        return last

    def add(self, key: str) -> None:
        """Insert ``key``; adding an existing or empty key does nothing."""
        if not key:
            return
        node, last, link, i = self._root, None, "eq", 0
        while node is not None and i < len(key):
            last = node
            if key[i] < node.char:
                node, link = node.lo, "lo"
            elif key[i] > node.char:
                node, link = node.hi, "hi"
            else:
                node, link = node.eq, "eq"
                i += 1
        if i < len(key):
            head = tail = _Node(key[i])
            for ch in key[i + 1:]:
                tail.eq = _Node(ch)
                tail = tail.eq
            tail.terminal = True
            if last is None:
                self._root = head
            else:
                setattr(last, link, head)
            self._size += 1
        elif not last.terminal:
            last.terminal = True
            self._size += 1

    def remove(self, key: str) -> bool:
        """Unmark ``key``; return whether it was present."""
        node = self._find(key)
        if node is None:
            return False
        node.terminal = False
        self._size -= 1
        return True

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def _walk(self) -> Iterator[str]:
        stack: list[tuple[Optional[_Node], str]] = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node is None:
                continue
            if node.terminal:
                yield prefix + node.char
            stack.append((node.eq, prefix + node.char))
            stack.append((node.hi, prefix))
            stack.append((node.lo, prefix))

    def keys(self) -> list[str]:
        """Return the keys in pre-order: a node, then its low, high and equal links."""
        return list(self._walk())

    def __len__(self) -> int:
        return self._size

    def copy(self) -> TernarySearchTree:
        """Return an independent copy with the same structure."""
        clone = TernarySearchTree()
        clone._size = self._size
        if self._root is None:
            return clone
        clone._root = _Node(self._root.char, self._root.terminal)
        pending = [(self._root, clone._root)]
        while pending:
            src, dst = pending.pop()
            for link in ("lo", "eq", "hi"):
                child = getattr(src, link)
                if child is not None:
                    twin = _Node(child.char, child.terminal)
                    setattr(dst, link, twin)
                    pending.append((child, twin))
        return clone