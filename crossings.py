# crossings.py

from enum import Enum
from itertools import combinations
from typing import Dict, FrozenSet, Iterable, NamedTuple, Sequence, Set
import logging

from edge import Edge
from fields import EdgeEndpoints
from utils_geom import segments_intersect

logger = logging.getLogger(__name__)


class LineIntersects(Enum):
    UNSOLVED = "unsolved"
    INTERSECTING = "intersecting"
    SOLVED = "solved"


class CrossingReport(NamedTuple):
    crossing_count: int
    node_status: Dict[int, LineIntersects]
    crossing_edges: FrozenSet[Edge]

    @property
    def solved(self) -> bool:
        return self.crossing_count == 0


def find_crossings(edges: Sequence[EdgeEndpoints]):
    """Yield every pair of non-adjacent edges whose segments intersect."""
    for (a1, p1, b1, q1), (a2, p2, b2, q2) in combinations(edges, 2):
        e1, e2 = Edge(a1, b1), Edge(a2, b2)
        # adjacency by id, whatever the positions
        if e1.isAdjacent(e2):
            continue
        if segments_intersect(p1, q1, p2, q2):
            yield e1, e2


class CrossingDetector:
    """
    Counts crossings each frame and tracks a status per node.
    - status: node id -> LineIntersects, carried from one detect() to the next
    """

    def __init__(self):
        self.status: Dict[int, LineIntersects] = {}
        self.crossing_count = 0

    def reset(self, nodes: Iterable[int] = ()):
        self.status = {n: LineIntersects.UNSOLVED for n in nodes}
        self.crossing_count = 0

    def detect(self, edges: Sequence[EdgeEndpoints]) -> CrossingReport:
        count = 0
        crossing_edges: Set[Edge] = set()
        implicated: Set[int] = set()
        for e1, e2 in find_crossings(edges):
            count += 1
            crossing_edges.update((e1, e2))
            implicated.update(e1)
            implicated.update(e2)

        seen = set()
        for a, _, b, _ in edges:
            seen.add(a); seen.add(b)
        for n in seen:
            self.status.setdefault(n, LineIntersects.UNSOLVED)

        for n, prev in self.status.items():
            if n in implicated:
                # unsolved nodes stay unsolved until first seen clear
                if prev != LineIntersects.UNSOLVED:
                    self.status[n] = LineIntersects.INTERSECTING
            else:
                self.status[n] = LineIntersects.SOLVED

        if count == 0 and self.crossing_count > 0:
            logger.info("no crossings left")
        self.crossing_count = count
        return CrossingReport(count, dict(self.status), frozenset(crossing_edges))

    def is_solved(self) -> bool:
        return self.crossing_count == 0
