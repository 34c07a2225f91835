from .geometry import (
    Point,
    angle_of,
    arrowhead_angle,
    clamp,
    dash_polyline,
    distance,
    midpoint,
    perpendicular_offset,
    quadratic_end_tangent,
    quadratic_point,
    sample_quadratic,
)
