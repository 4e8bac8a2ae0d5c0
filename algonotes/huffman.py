"""Huffman coding of byte strings into a self-describing compressed form.

The compressed layout holds the code tree, written breadth first (0 for an
internal node; 1 and eight value bits for a leaf), followed by the code of
every input byte. The bits are packed most significant bit first. The last
byte is a mask whose leading ones tell how many bits of the byte before it
are used.
"""

from __future__ import annotations

import heapq
import itertools
import sys
from collections import Counter, deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

BYTE = 8

_DEMO_TEXTS = ("abcdefg", "aaabbb", "abcabcabcabc", "aaabbbbb", "aaaaaa", "a", "baaccc")


class HuffmanError(ValueError):
    """Raised for input that cannot be compressed or decompressed."""


@dataclass(eq=False)
class _Node:
    value: int = 0
    left: Optional[_Node] = None
    right: Optional[_Node] = None

    @property
    def is_leaf(self) -> bool:
        # internal nodes always have two children
        return self.left is None or self.right is None


def _build_tree(data: bytes) -> _Node:
    counts = Counter(data)
    order = itertools.count()
    heap = [(freq, next(order), _Node(value)) for value, freq in sorted(counts.items())]
    heapq.heapify(heap)
    while len(heap) > 1:
        lfreq, _, left = heapq.heappop(heap)
        rfreq, _, right = heapq.heappop(heap)
        heapq.heappush(heap, (lfreq + rfreq, next(order), _Node(left=left, right=right)))
    return heap[0][2]


def _code_table(root: _Node) -> dict[int, str]:
    if root.is_leaf:
        return {root.value: "1"}
    table: dict[int, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            table[node.value] = prefix
        else:
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))
    return table


def _tree_bits(root: _Node) -> str:
    parts = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.is_leaf:
            parts.append("1" + format(node.value, "08b"))
        else:
            parts.append("0")
            queue.append(node.left)
            queue.append(node.right)
    return "".join(parts)


def _pack(bits: str) -> bytes:
    full = len(bits) // BYTE * BYTE
    out = bytearray(int(bits[i:i + BYTE], 2) for i in range(0, full, BYTE))
    rest = len(bits) - full
    if rest:
        out.append(int(bits[full:].ljust(BYTE, "0"), 2))
        out.append(int("1" * rest + "0" * (BYTE - rest), 2))
    else:
        out.append(0xFF)
    return bytes(out)


def _unpack(data: bytes) -> Iterator[str]:
    for byte in data[:-2]:
        yield from format(byte, "08b")
    used = bin(data[-1]).count("1")
    yield from format(data[-2], "08b")[:used]


def compress(data) -> bytes:
    """Compress a non-empty bytes-like object."""
    raw = bytes(memoryview(data))
    if not raw:
        raise HuffmanError("cannot compress empty input")
    root = _build_tree(raw)
    table = _code_table(root)
    encoded = "".join(table[b] for b in raw)
    return _pack(_tree_bits(root) + encoded)


def decompress(data) -> bytes:
    """Restore the bytes that :func:`compress` was given."""
    raw = bytes(memoryview(data))
    if len(raw) < 3:
        raise HuffmanError("compressed data too short")
    bits = _unpack(raw)

    def take() -> str:
        bit = next(bits, None)
        if bit is None:
            raise HuffmanError("unexpected end of compressed data")
        return bit

    def read_value() -> int:
        return int("".join(take() for _ in range(BYTE)), 2)

    def read_child() -> tuple[_Node, bool]:
        if take() == "0":
            return _Node(), True
        return _Node(read_value()), False

    if take() == "1":
        root = _Node(read_value())
    else:
        root = _Node()
        queue = deque([root])
        while queue:
            node = queue.popleft()
            node.left, internal = read_child()
            if internal:
                queue.append(node.left)
            node.right, internal = read_child()
            if internal:
                queue.append(node.right)

    if root.is_leaf:
        return bytes([root.value]) * sum(1 for _ in bits)

    out = bytearray()
    node = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node.is_leaf:
            out.append(node.value)
            node = root
    return bytes(out)


def main(argv=None) -> int:
    """Compress and restore each given text (or a built-in set) and print both."""
    texts = list(sys.argv[1:] if argv is None else argv) or list(_DEMO_TEXTS)
    for number, text in enumerate(texts, 1):
        packed = compress(text.encode("utf-8"))
        print(f"test{number} = {text}\ncompr = {packed.hex()}")
        restored = decompress(packed).decode("utf-8", errors="replace")
        print(f"uncompressed:\n{restored}")
    return 0


if __name__ == "__main__":
    sys.exit(main())