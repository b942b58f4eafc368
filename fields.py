# fields.py
"""
Steering field over the current drawing.

Every function is pure: positions come in as arguments, a QPointF comes out.
Node and edge terms blend all candidates with softargmin instead of picking
the nearest one, so the field stays continuous where the nearest candidate
switches. `sigma` sets the sharpness: large values approach a hard minimum,
values near 1 approach a plain average.
"""

from PyQt5.QtCore import QPointF
from typing import Dict, Iterable, List, Sequence, Tuple
import math

from utils_geom import v_sub, v_scale, v_len, v_sum, v_neg, project_point_on_segment

Segment = Tuple[QPointF, QPointF]
EdgeEndpoints = Tuple[int, QPointF, int, QPointF]


def softargmin(vectors: Sequence[QPointF], sigma: float) -> List[Tuple[float, QPointF]]:
    """
    Weight each vector by sigma ** -|v| and normalize the weights to 1.

    Evaluated in log space relative to the shortest vector, which gives the
    same weights but cannot underflow to an all-zero normalizer.
    """
    if sigma <= 0.0:
        raise ValueError(f"sigma must be > 0, got {sigma}")
    if not vectors:
        return []
    log_base = math.log(sigma)
    exponents = [-v_len(v) * log_base for v in vectors]
    top = max(exponents)
    raw = [math.exp(e - top) for e in exponents]
    total = sum(raw)
    return [(w / total, v) for w, v in zip(raw, vectors)]


def _blend(vectors: Sequence[QPointF], sigma: float) -> QPointF:
    return v_sum(v_scale(v, w) for w, v in softargmin(vectors, sigma))


def points_strength(positions: Iterable[QPointF], query: QPointF, sigma: float) -> QPointF:
    """Soft pull towards the nearest of `positions`."""
    return _blend([v_sub(p, query) for p in positions], sigma)


def lines_strength(segments: Iterable[Segment], query: QPointF, sigma: float) -> QPointF:
    """Soft pull towards the closest point of the nearest segment."""
    vectors = []
    for a, b in segments:
        closest = project_point_on_segment(query, a, b)
        if closest is None:
            continue
        vectors.append(v_sub(closest, query))
    return _blend(vectors, sigma)


def boundary_strength(query: QPointF) -> QPointF:
    return v_neg(query)


def points_strength_except(positions: Dict[int, QPointF], node: int,
                           query: QPointF, sigma: float) -> QPointF:
    return points_strength((p for n, p in positions.items() if n != node), query, sigma)


def lines_strength_except(edges: Iterable[EdgeEndpoints], node: int,
                          query: QPointF, sigma: float) -> QPointF:
    return lines_strength(
        ((pa, pb) for a, pa, b, pb in edges if a != node and b != node),
        query, sigma,
    )
