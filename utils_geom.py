# utils_geom.py

from PyQt5.QtCore import QPointF
from typing import Optional
import math

EPS = 1e-9

def v_add(a: QPointF, b: QPointF) -> QPointF:
    return QPointF(a.x() + b.x(), a.y() + b.y())

def v_sub(a: QPointF, b: QPointF) -> QPointF:
    return QPointF(a.x() - b.x(), a.y() - b.y())

def v_scale(a: QPointF, s: float) -> QPointF:
    return QPointF(a.x() * s, a.y() * s)

def v_neg(a: QPointF) -> QPointF:
    return QPointF(-a.x(), -a.y())

def v_len(a: QPointF) -> float:
    return math.hypot(a.x(), a.y())

def v_len2(a: QPointF) -> float:
    return a.x() * a.x() + a.y() * a.y()

def v_norm(a: QPointF) -> QPointF:
    L = v_len(a)
    return QPointF(0.0, 0.0) if L == 0.0 else v_scale(a, 1.0 / L)

def v_with_length(a: QPointF, length: float) -> QPointF:
    # Zero stays zero
    return v_scale(v_norm(a), length)

def v_clamp_length(a: QPointF, max_len: float) -> QPointF:
    L = v_len(a)
    return a if L <= max_len else v_scale(a, max_len / L)

def v_dot(a: QPointF, b: QPointF) -> float:
    return a.x() * b.x() + a.y() * b.y()

def v_cross(a: QPointF, b: QPointF) -> float:
    # 2D "z-component" cross product (scalar)
    return a.x() * b.y() - a.y() * b.x()

def v_from_angle(theta_rad: float) -> QPointF:
    return QPointF(math.cos(theta_rad), math.sin(theta_rad))

def v_angle_between(a: QPointF, b: QPointF) -> float:
    """Signed angle in (-pi, pi] that rotates a onto b."""
    return math.atan2(v_cross(a, b), v_dot(a, b))

def v_sum(vectors) -> QPointF:
    sx = 0.0; sy = 0.0
    for v in vectors:
        sx += v.x(); sy += v.y()
    return QPointF(sx, sy)

def project_point_on_segment(p: QPointF, a: QPointF, b: QPointF) -> Optional[QPointF]:
    """
    Return the closest point to p on the finite segment ab, or None when
    the segment has zero length (the projection is indeterminate).
    """
    ax, ay = a.x(), a.y()
    bx, by = b.x(), b.y()
    px, py = p.x(), p.y()
    abx, aby = (bx - ax), (by - ay)
    denom = abx * abx + aby * aby
    if denom <= EPS * EPS:
        return None
    t = ((px - ax) * abx + (py - ay) * aby) / denom
    t = 0.0 if t < 0.0 else (1.0 if t > 1.0 else t)
    return QPointF(ax + t * abx, ay + t * aby)

def bbox_disjoint(a1: QPointF, a2: QPointF, b1: QPointF, b2: QPointF, pad: float = 0.0) -> bool:
    min_ax = min(a1.x(), a2.x()) - pad; max_ax = max(a1.x(), a2.x()) + pad
    min_ay = min(a1.y(), a2.y()) - pad; max_ay = max(a1.y(), a2.y()) + pad
    min_bx = min(b1.x(), b2.x()) - pad; max_bx = max(b1.x(), b2.x()) + pad
    min_by = min(b1.y(), b2.y()) - pad; max_by = max(b1.y(), b2.y()) + pad
    return (max_ax < min_bx) or (max_bx < min_ax) or (max_ay < min_by) or (max_by < min_ay)

def orient(a: QPointF, b: QPointF, c: QPointF) -> float:
    # Positive if a->b->c is CCW
    return v_cross(v_sub(b, a), v_sub(c, a))

def on_segment(a: QPointF, b: QPointF, p: QPointF) -> bool:
    # p collinear with ab and inside its bounding box (endpoints included)
    if abs(orient(a, b, p)) > EPS:
        return False
    return (min(a.x(), b.x()) - EPS <= p.x() <= max(a.x(), b.x()) + EPS and
            min(a.y(), b.y()) - EPS <= p.y() <= max(a.y(), b.y()) + EPS)

def _sign(x: float) -> int:
    if x > EPS: return 1
    if x < -EPS: return -1
    return 0

def segments_intersect(a1: QPointF, a2: QPointF, b1: QPointF, b2: QPointF) -> bool:
    """
    True if the closed segments [a1,a2] and [b1,b2] share at least one point.
    Touching and collinear overlap count as intersecting; callers exclude
    segments that share an endpoint before asking.
    """
    if bbox_disjoint(a1, a2, b1, b2, pad=EPS):
        return False
    o1 = _sign(orient(a1, a2, b1))
    o2 = _sign(orient(a1, a2, b2))
    o3 = _sign(orient(b1, b2, a1))
    o4 = _sign(orient(b1, b2, a2))

    if o1 != o2 and o3 != o4:
        return True

    if o1 == 0 and on_segment(a1, a2, b1): return True
    if o2 == 0 and on_segment(a1, a2, b2): return True
    if o3 == 0 and on_segment(b1, b2, a1): return True
    if o4 == 0 and on_segment(b1, b2, a2): return True
    return False
