# steering.py

from PyQt5.QtCore import QPointF
from typing import Dict, Optional, Sequence

from fields import (
    EdgeEndpoints, boundary_strength, lines_strength_except, points_strength_except
)
from utils_geom import v_add, v_len, v_len2, v_neg, v_scale, v_sub, v_with_length, v_clamp_length

MAX_DIRECTION = 3.0
MAX_DELTA_TIME = 0.1
CURSOR_SLOWDOWN_DIST2 = 10000.0


def _invert(value: float) -> float:
    return 10.0 / max(value, 1.0)


def steering_direction(node: int, point: QPointF, positions: Dict[int, QPointF],
                       edges: Sequence[EdgeEndpoints], target_centre_length: float,
                       sigma: float) -> QPointF:
    """
    Strongest of three pushes: back towards the target ring around the
    origin, away from the nearest other node, away from the nearest edge
    not touching this node. Clamped to MAX_DIRECTION.
    """
    to_point = points_strength_except(positions, node, point, sigma)
    to_line = lines_strength_except(edges, node, point, sigma)
    to_centre = boundary_strength(point)
    candidates = [
        v_with_length(to_centre, _invert(target_centre_length - v_len(to_centre))),
        v_with_length(v_neg(to_point), _invert(v_len(to_point) / 2.0)),
        v_with_length(v_neg(to_line), _invert(v_len(to_line))),
    ]
    return v_clamp_length(max(candidates, key=v_len2), MAX_DIRECTION)


def steering_velocity(direction: QPointF, delta_time: float, move_speed: float) -> QPointF:
    return v_scale(direction, min(delta_time, MAX_DELTA_TIME) * move_speed)


def apply_velocity(position: QPointF, velocity: QPointF,
                   cursor: Optional[QPointF] = None) -> QPointF:
    # Slow down near the cursor
    speed = 1.0
    if cursor is not None:
        speed = min(max(v_len2(v_sub(cursor, position)) / CURSOR_SLOWDOWN_DIST2, 0.0), 1.0)
    return v_add(position, v_scale(velocity, speed))
