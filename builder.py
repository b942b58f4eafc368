# builder.py

from PyQt5.QtCore import QPointF
from typing import Dict, List, NamedTuple, Tuple
import logging
import math
import random

from graph import Graph
from utils_geom import v_sub, v_angle_between

logger = logging.getLogger(__name__)

PI = math.pi


class IntersectionKey(NamedTuple):
    """A node as "the intersection of circle i and circle j", i < j."""
    i: int
    j: int

    @classmethod
    def of(cls, a: int, b: int) -> "IntersectionKey":
        return cls(min(a, b), max(a, b))


class GeneralPositionError(ValueError):
    """Two intersections on the same circle resolved to the same place."""

    def __init__(self, circle: int, first: IntersectionKey, second: IntersectionKey):
        self.circle = circle
        self.keys = (first, second)
        if first == second:
            detail = f"circles {first.i} and {first.j} share a centre, intersection {tuple(first)} is undefined"
        else:
            detail = f"intersections {tuple(first)} and {tuple(second)} coincide on circle {circle}"
        super().__init__(f"Circles not in general position: {detail}")


class GraphBuilder:
    def __init__(self, rng: random.Random):
        self._rng = rng

    def make_circles(self, circle_count: int) -> List[QPointF]:
        # x then y per circle, uniform in the unit square
        circles = []
        for _ in range(circle_count):
            x = self._rng.random()
            y = self._rng.random()
            circles.append(QPointF(x, y))
        return circles

    @staticmethod
    def arc_dist(centre: QPointF, other: QPointF) -> float:
        # How far round the circle at `centre` its intersection with `other`
        # sits; angle OAB is proportional to that arc length.
        return v_angle_between(centre, v_sub(other, centre)) % PI

    def build(self, circle_count: int) -> Graph:
        if circle_count < 2:
            raise ValueError(f"circle_count must be >= 2, got {circle_count}")
        return self.build_from_circles(self.make_circles(circle_count))

    def build_from_circles(self, circles: List[QPointF]) -> Graph:
        graph = Graph()
        edges: List[Tuple[IntersectionKey, IntersectionKey]] = []
        for i, centre in enumerate(circles):
            for k in range(i + 1, len(circles)):
                if circles[k] == centre:
                    # identical circles meet everywhere
                    key = IntersectionKey(i, k)
                    raise GeneralPositionError(i, key, key)
            ordered = sorted(
                ((self.arc_dist(centre, c), k) for k, c in enumerate(circles) if k != i),
                key=lambda t: t[0],
            )
            for (da, a), (db, b) in zip(ordered, ordered[1:]):
                if da == db or circles[a] == circles[b]:
                    raise GeneralPositionError(i, IntersectionKey.of(a, i), IntersectionKey.of(b, i))
                edges.append((IntersectionKey.of(a, i), IntersectionKey.of(b, i)))
            if len(ordered) >= 3:
                # close the cycle of intersections around circle i
                edges.append((IntersectionKey.of(ordered[-1][1], i), IntersectionKey.of(ordered[0][1], i)))

        ids: Dict[IntersectionKey, int] = {}
        for a in range(len(circles)):
            for b in range(a + 1, len(circles)):
                key = IntersectionKey(a, b)
                ids[key] = len(ids)
                graph.addNode(ids[key], label=key)
        for ka, kb in edges:
            graph.addEdge(ids[ka], ids[kb])

        logger.debug("built graph from %d circles: %s", len(circles), graph.get_stats())
        return graph
