# reducer.py

from PyQt5.QtCore import QPointF
from typing import Callable, Dict, Iterable, Optional, Tuple
import logging
import math
import random

from graph import Graph
from history import GraphHistory
from utils_geom import v_from_angle, v_scale

logger = logging.getLogger(__name__)

TAU = 2.0 * math.pi


def degree_weight(degree: int) -> int:
    """floor(log2(degree)); degrees 0 and 1 weigh nothing."""
    return degree.bit_length() - 1 if degree > 1 else 0


def degree_weighted_choice(graph: Graph, rng: random.Random, nodes: Iterable[int]) -> Optional[int]:
    """
    Pick one of `nodes` with probability proportional to degree_weight.
    Falls back to a uniform pick when every weight is zero; None if empty.
    """
    candidates = sorted(nodes)
    if not candidates:
        return None
    weights = [degree_weight(graph.getDegree(n)) for n in candidates]
    if not any(weights):
        return rng.choice(candidates)
    return rng.choices(candidates, weights=weights)[0]


def merge_nodes(graph: Graph, target: int, other: int):
    """Fold `other` into `target`, redirecting its edges; `other` is removed."""
    for k in graph.getNeighbors(other):
        graph.removeEdge(other, k)
        if k != target:
            graph.addEdge(target, k)
    graph.removeNode(other)


class GraphReducer:
    def __init__(self, rng: random.Random):
        self._rng = rng
        self.history = GraphHistory()

    # --------------------------
    # Pruning and placement
    # --------------------------
    @staticmethod
    def prune(graph: Graph) -> Graph:
        """Single pass: drop every node whose degree is <= 1."""
        pruned = graph.copy()
        for n in graph.getNodes():
            if graph.getDegree(n) <= 1:
                pruned.removeNode(n)
        return pruned

    def starting_position(self, distance: float, random_offset: float) -> QPointF:
        direction = v_from_angle(self._rng.uniform(0.0, TAU))
        if random_offset != 0.0:
            return v_scale(direction, distance + self._rng.uniform(-random_offset, random_offset))
        return v_scale(direction, distance)

    def prune_and_place(self, graph: Graph, distance: float,
                        random_offset: float = 0.0) -> Tuple[Graph, Dict[int, QPointF]]:
        pruned = self.prune(graph)
        positions = {n: self.starting_position(distance, random_offset) for n in pruned.getNodes()}
        return pruned, positions

    # --------------------------
    # Contraction
    # --------------------------
    def contract_to(self, graph: Graph, target: int,
                    on_hide: Optional[Callable[[int], None]] = None) -> Tuple[Graph, GraphHistory]:
        """
        Randomly merge adjacent nodes until at most `target` remain.
        A snapshot is pushed before every step; isolated picks are deleted.
        `on_hide(node)` is called for each node merged or deleted away.
        """
        if target < 1:
            raise ValueError(f"target node count must be >= 1, got {target}")
        graph = graph.copy()
        self.history.clear()

        while graph.nodeCount() > target:
            logger.debug("contracting: %d nodes", graph.nodeCount())
            self.history.push(graph)
            node = degree_weighted_choice(graph, self._rng, graph.getNodes())
            other = degree_weighted_choice(graph, self._rng, graph.getNeighbors(node))
            if other is None:
                graph.removeNode(node)
                if on_hide is not None:
                    on_hide(node)
                continue
            merge_nodes(graph, node, other)
            if on_hide is not None:
                on_hide(other)

        logger.info("contracted to %d nodes in %d steps", graph.nodeCount(), len(self.history))
        return graph, self.history

    def grow(self) -> Optional[Graph]:
        """Undo one contraction step; None when there is nothing to undo."""
        return self.history.pop()

    def can_grow(self) -> bool:
        return bool(self.history)
