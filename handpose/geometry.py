"""
2D geometry predicates used by the finger classifier.
"""
import math
from typing import Sequence

from .types import Point2D


def distance(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def is_near(p: Point2D, candidates: Sequence[Point2D], min_distance: float = 40.0) -> bool:
    """
    Check whether a point lies closer than min_distance to any candidate.

    Args:
        p: Point to test
        candidates: Reference points, may be empty
        min_distance: Strict upper bound on the distance

    Returns:
        True on the first candidate strictly closer than min_distance
    """
    for candidate in candidates:
        if distance(p, candidate) < min_distance:
            return True
    return False


def point_in_polygon(p: Point2D, vertices: Sequence[Point2D]) -> bool:
    """
    Crossing-number containment test.

    Consecutive vertices form the edges and the last vertex joins the first.
    Fewer than two vertices never contain anything. Horizontal edges never
    satisfy the straddle check and are skipped. Self-intersecting polygons
    get whatever the crossing count gives.

    Args:
        p: Point to test
        vertices: Ordered polygon vertices

    Returns:
        True if a ray cast from p crosses the boundary an odd number of times
    """
    n = len(vertices)
    if n < 2:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        vi = vertices[i]
        vj = vertices[j]
        if (vi.y > p.y) != (vj.y > p.y):
            x_cross = (vj.x - vi.x) * (p.y - vi.y) / (vj.y - vi.y) + vi.x
            if p.x < x_cross:
                inside = not inside
        j = i
    return inside
