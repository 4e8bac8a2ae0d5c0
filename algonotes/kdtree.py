"""A k-d tree over arbitrary objects for nearest-neighbour queries."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

Point = Sequence[float]
DistanceFunction = Callable[[Point, Point], float]


def squared_distance(a: Point, b: Point) -> float:
    """Return the squared Euclidean distance between two points."""
    if len(a) != len(b):
        raise ValueError("points must have the same number of coordinates")
    return sum((x - y) ** 2 for x, y in zip(a, b))


@dataclass
class _Node(Generic[T]):
    obj: T
    coords: tuple[float, ...]
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


class KDTree(Generic[T]):
    """A k-d tree built by splitting on the median of each axis in turn.

    ``coordinates`` maps an object to its ``dim`` coordinates. Medians are
    found by randomized selection using ``rng``. Objects whose coordinate on
    the split axis is below the median go left, the rest go right.
    """

    def __init__(
        self,
        data: Sequence[T] = (),
        dim: int = 2,
        coordinates: Callable[[T], Point] = tuple,
        rng: Optional[random.Random] = None,
    ) -> None:
        if dim < 1:
            raise ValueError("a k-d tree needs at least one dimension")
        self._dim = dim
        self._rng = rng if rng is not None else random.Random()
        items = []
        for obj in data:
            coords = tuple(float(c) for c in coordinates(obj))
            if len(coords) != dim:
                raise ValueError(
                    f"expected {dim} coordinates, got {len(coords)}"
                )
            items.append(_Node(obj, coords))
        self._root = self._build(items, 0)

    @property
    def dim(self) -> int:
        return self._dim

    def _select(self, items: list[_Node[T]], axis: int, k: int) -> _Node[T]:
        """Return an item whose value on ``axis`` has rank ``k``."""
        while True:
            pivot = self._rng.choice(items)
            value = pivot.coords[axis]
            less = [n for n in items if n is not pivot and n.coords[axis] < value]
            if len(less) == k:
                return pivot
            if len(less) > k:
                items = less
            else:
                k -= len(less) + 1
                items = [
                    n for n in items if n is not pivot and n.coords[axis] >= value
                ]

    def _build(self, items: list[_Node[T]], axis: int) -> Optional[_Node[T]]:
        if not items:
            return None
        if len(items) == 1:
            return items[0]
        median = self._select(items, axis, (len(items) - 1) // 2)
        value = median.coords[axis]
        rest = [n for n in items if n is not median]
        nxt = (axis + 1) % self._dim
        median.left = self._build([n for n in rest if n.coords[axis] < value], nxt)
        median.right = self._build([n for n in rest if n.coords[axis] >= value], nxt)
        return median

    def neighbour(
        self, point: Point, distance: DistanceFunction = squared_distance
    ) -> Optional[T]:
        """Return the object nearest to ``point`` under ``distance``.

        The far side of a split is searched only when the best distance so
        far exceeds the gap between the point and the splitting plane.
        Returns None for an empty tree.
        """
        target = tuple(float(c) for c in point)
        if len(target) != self._dim:
            raise ValueError(f"expected {self._dim} coordinates, got {len(target)}")

        def search(node: Optional[_Node[T]], axis: int) -> Optional[_Node[T]]:
            if node is None:
                return None
            best, best_dist = node, distance(node.coords, target)
            nxt = (axis + 1) % self._dim
            goes_left = target[axis] < node.coords[axis]
            near, far = (node.left, node.right) if goes_left else (node.right, node.left)
            for child, always in ((near, True), (far, False)):
                if not always and best_dist <= abs(node.coords[axis] - target[axis]):
                    break
                found = search(child, nxt)
                if found is not None:
                    d = distance(found.coords, target)
                    if d < best_dist:
                        best, best_dist = found, d
            return best

        found = search(self._root, 0)
        return found.obj if found is not None else None

    def render(self) -> str:
        """List node coordinates level by level, one ``(x,y,...,)`` per line."""
        if self._root is None:
            return ""
        lines = []
        queue: deque[_Node[Any]] = deque([self._root])
        while queue:
            node = queue.popleft()
            lines.append("(" + "".join(f"{c:g}," for c in node.coords) + ")\n")
            queue.extend(child for child in (node.left, node.right) if child)
        return "".join(lines)