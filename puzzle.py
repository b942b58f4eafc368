# puzzle.py

from dataclasses import dataclass
from PyQt5.QtCore import QPointF
from typing import Dict, List, Optional, Union
import logging
import random
import secrets

from builder import GraphBuilder
from config import PuzzleConfig
from crossings import CrossingDetector, CrossingReport
from fields import EdgeEndpoints, boundary_strength, lines_strength, points_strength
from graph import Graph
from reducer import GraphReducer
from scene import Scene
from steering import apply_velocity, steering_direction, steering_velocity
from utils_geom import v_len

logger = logging.getLogger(__name__)


# --------------------------
# Commands
# --------------------------
@dataclass(frozen=True)
class Reset:
    pass

@dataclass(frozen=True)
class Resize:
    target_node_count: int
    circle_count: int

@dataclass(frozen=True)
class Grow:
    pass

@dataclass(frozen=True)
class MoveOutwards:
    delta_time: float
    cursor: Optional[QPointF] = None

Command = Union[Reset, Resize, Grow, MoveOutwards]


class Puzzle:
    def __init__(self, scene: Scene, config: Optional[PuzzleConfig] = None,
                 rng: Optional[random.Random] = None):
        self.scene = scene
        self.config = (config or PuzzleConfig()).validate()
        # Robust randomness unless the caller injects a generator
        self._rng = rng if rng is not None else random.Random(secrets.randbits(64))
        self.builder = GraphBuilder(self._rng)
        self.reducer = GraphReducer(self._rng)
        self.detector = CrossingDetector()
        self.graph = Graph()
        self.handles: Dict[int, object] = {}
        self.last_report: Optional[CrossingReport] = None

    # --------------------------
    # Commands
    # --------------------------
    def handle(self, command: Command):
        if isinstance(command, Reset):
            return self.reset()
        if isinstance(command, Resize):
            return self.resize(command.target_node_count, command.circle_count)
        if isinstance(command, Grow):
            return self.grow()
        if isinstance(command, MoveOutwards):
            return self.step(command.delta_time, command.cursor)
        raise TypeError(f"Unknown command: {command!r}")

    def resize(self, target_node_count: int, circle_count: int):
        """Takes effect on the next reset."""
        cfg = self.config
        old = (cfg.target_node_count, cfg.circle_count)
        cfg.target_node_count, cfg.circle_count = target_node_count, circle_count
        try:
            cfg.validate()
        except ValueError:
            cfg.target_node_count, cfg.circle_count = old
            raise

    def reset(self) -> Graph:
        cfg = self.config
        # the current level stays intact if generation aborts
        raw = self.builder.build(cfg.circle_count)
        pruned, positions = self.reducer.prune_and_place(
            raw, cfg.node_starting_distance, cfg.node_starting_random_offset
        )

        self.scene.clear()
        self.handles = {}
        for n in pruned.getNodes():
            self.handles[n] = self.scene.create_node(positions[n])

        self.graph, _ = self.reducer.contract_to(
            pruned, cfg.target_node_count, on_hide=lambda n: self.scene.hide(self.handles[n])
        )
        self._rebuild_edges()
        logger.info(
            "new puzzle: %d circles, %d nodes built, %d kept, %d after contraction",
            cfg.circle_count, raw.nodeCount(), pruned.nodeCount(), self.graph.nodeCount()
        )
        return self.graph

    def grow(self) -> bool:
        bigger = self.reducer.grow()
        if bigger is None:
            return False
        for n in bigger.getNodes():
            self.scene.show(self.handles[n])
        self.graph = bigger
        self._rebuild_edges()
        logger.info("grew puzzle to %d nodes", self.graph.nodeCount())
        return True

    def _rebuild_edges(self):
        self.scene.destroy_edges()
        for e in self.graph.getEdges():
            self.scene.create_edge(self.handles[e.getStart()], self.handles[e.getEnd()])
        self.detector.reset(self.graph.getNodes())
        self.last_report = None

    # --------------------------
    # Per-frame queries
    # --------------------------
    def positions(self) -> Dict[int, QPointF]:
        out = {}
        for n in self.graph.getNodes():
            p = self.scene.position_of(self.handles[n])
            if p is not None:
                out[n] = p
        return out

    def edges_with_endpoints(self, positions: Optional[Dict[int, QPointF]] = None) -> List[EdgeEndpoints]:
        if positions is None:
            positions = self.positions()
        out = []
        for e in self.graph.getEdges():
            a, b = e.getStart(), e.getEnd()
            # hidden or missing endpoint: skip the edge this frame
            if a not in positions or b not in positions:
                continue
            out.append((a, positions[a], b, positions[b]))
        return out

    def step(self, delta_time: float, cursor: Optional[QPointF] = None) -> Dict[int, QPointF]:
        """Move every visible node one frame along the steering field."""
        cfg = self.config
        positions = self.positions()
        edges = self.edges_with_endpoints(positions)
        moved = {}
        for n, p in positions.items():
            direction = steering_direction(
                n, p, positions, edges, cfg.target_centre_length, cfg.field_base
            )
            velocity = steering_velocity(direction, delta_time, cfg.move_speed)
            moved[n] = apply_velocity(p, velocity, cursor)
        for n, p in moved.items():
            self.scene.set_position(self.handles[n], p)
        return moved

    def update_crossings(self) -> CrossingReport:
        self.last_report = self.detector.detect(self.edges_with_endpoints())
        return self.last_report

    def is_solved(self) -> bool:
        return self.last_report is not None and self.last_report.solved

    def field_report(self, point: QPointF):
        """Magnitudes of the edge, node and centre terms at `point`."""
        positions = self.positions()
        segments = [(pa, pb) for _, pa, _, pb in self.edges_with_endpoints(positions)]
        red = v_len(lines_strength(segments, point, self.config.field_base))
        blue = v_len(points_strength(positions.values(), point, self.config.field_base))
        green = v_len(boundary_strength(point))
        if self.config.debug_print:
            logger.debug("field at (%.1f, %.1f): lines=%.3f points=%.3f centre=%.3f",
                         point.x(), point.y(), red, blue, green)
        return {"lines": red, "points": blue, "centre": green}
