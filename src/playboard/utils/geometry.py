import math
from typing import List, Optional, Sequence, Tuple

Point = Tuple[float, float]


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def distance(p: Point, q: Point) -> float:
    return math.hypot(q[0] - p[0], q[1] - p[1])


def angle_of(p: Point, q: Point) -> float:
    """Direction from p to q in radians (y grows downwards)."""
    return math.atan2(q[1] - p[1], q[0] - p[0])


def quadratic_point(p0: Point, control: Point, p1: Point, t: float) -> Point:
    t = clamp(t, 0.0, 1.0)
    mt = 1.0 - t
    x = mt * mt * p0[0] + 2 * mt * t * control[0] + t * t * p1[0]
    y = mt * mt * p0[1] + 2 * mt * t * control[1] + t * t * p1[1]
    return (x, y)


def quadratic_end_tangent(control: Point, p1: Point) -> Point:
    """Derivative of the quadratic curve at t=1."""
    return (2 * (p1[0] - control[0]), 2 * (p1[1] - control[1]))


def arrowhead_angle(start: Point, end: Point, control: Optional[Point] = None) -> float:
    # Curved segments point along the end tangent, which is parallel to control->end.
    if control is not None:
        tx, ty = quadratic_end_tangent(control, end)
        if tx or ty:
            return math.atan2(ty, tx)
    return angle_of(start, end)


def sample_quadratic(p0: Point, control: Point, p1: Point, steps: int = 24) -> List[Point]:
    steps = max(1, int(steps))
    return [quadratic_point(p0, control, p1, i / steps) for i in range(steps + 1)]


def midpoint(p: Point, q: Point) -> Point:
    return ((p[0] + q[0]) / 2.0, (p[1] + q[1]) / 2.0)


def perpendicular_offset(p: Point, q: Point, amount: float) -> Point:
    """Point `amount` away from the midpoint of pq, on its left-hand normal."""
    mx, my = midpoint(p, q)
    length = distance(p, q)
    if length == 0:
        return (mx, my - amount)
    nx = -(q[1] - p[1]) / length
    ny = (q[0] - p[0]) / length
    return (mx + nx * amount, my + ny * amount)


def dash_polyline(points: Sequence[Point], pattern: Sequence[float]) -> List[List[Point]]:
    """Split a polyline into the visible runs of an on/off dash pattern."""
    if not pattern or len(points) < 2:
        return [list(points)]
    runs: List[List[Point]] = []
    index = 0
    remaining = pattern[0]
    drawing = True
    current: List[Point] = [points[0]]
    for a, b in zip(points, points[1:]):
        seg = distance(a, b)
        pos = 0.0
        while seg - pos > remaining:
            pos += remaining
            t = pos / seg
            cut = (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)
            if drawing:
                current.append(cut)
                runs.append(current)
            current = [cut]
            drawing = not drawing
            index = (index + 1) % len(pattern)
            remaining = pattern[index]
        remaining -= seg - pos
        if drawing:
            current.append(b)
        else:
            current = [b]
    if drawing and len(current) > 1:
        runs.append(current)
    return runs
