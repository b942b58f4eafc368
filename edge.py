# edge.py
from __future__ import annotations
from typing import Tuple

class Edge:
    __slots__ = ("_start", "_end")

    def __init__(self, start: int, end: int):
        # Prevent loops
        if start == end:
            raise ValueError(f"Edge endpoints must be distinct (no loops): {start}")
        # Canonical orientation (small id first)
        if start > end:
            start, end = end, start
        self._start = start
        self._end = end

    # --- Getters ---
    def getStart(self) -> int: return self._start
    def getEnd(self) -> int: return self._end

    def touches(self, node: int) -> bool:
        return node == self._start or node == self._end

    def isAdjacent(self, other: "Edge") -> bool:
        """True if the two edges share an endpoint id."""
        return self.touches(other._start) or self.touches(other._end)

    # Convenience: tuple key by endpoint ids
    def key(self) -> Tuple[int, int]:
        return (self._start, self._end)

    def __iter__(self):
        yield self._start
        yield self._end

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.key() == other.key()

    def __lt__(self, other: "Edge") -> bool:
        return self.key() < other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self):
        return f"E({self._start} - {self._end})"
