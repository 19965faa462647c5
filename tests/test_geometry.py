"""
Test cases for the geometry predicates.
"""
import sys
import unittest
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from handpose.geometry import distance, is_near, point_in_polygon
from handpose.types import Point2D

SQUARE = [Point2D(0, 0), Point2D(10, 0), Point2D(10, 10), Point2D(0, 10)]


class TestDistance(unittest.TestCase):

    def test_pythagorean(self):
        self.assertEqual(distance(Point2D(0, 0), Point2D(3, 4)), 5.0)

    def test_symmetric(self):
        a, b = Point2D(1.5, -2), Point2D(-7, 4.25)
        self.assertAlmostEqual(distance(a, b), distance(b, a))


class TestIsNear(unittest.TestCase):
    """Test the strict near-point threshold."""

    def test_empty_candidates(self):
        self.assertFalse(is_near(Point2D(0, 0), []))

    def test_within_threshold(self):
        self.assertTrue(is_near(Point2D(0, 0), [Point2D(100, 100), Point2D(39.9, 0)]))

    def test_exact_threshold_is_not_near(self):
        self.assertFalse(is_near(Point2D(0, 0), [Point2D(40, 0)]))
        self.assertFalse(is_near(Point2D(0, 0), [Point2D(3, 4)], min_distance=5.0))

    def test_custom_threshold(self):
        p = Point2D(0, 0)
        self.assertFalse(is_near(p, [Point2D(25, 0)], min_distance=20.0))
        self.assertTrue(is_near(p, [Point2D(25, 0)]))

    def test_order_does_not_matter(self):
        p = Point2D(5, 5)
        candidates = [Point2D(500, 500), Point2D(6, 6), Point2D(-300, 0)]
        self.assertEqual(is_near(p, candidates), is_near(p, list(reversed(candidates))))


class TestPointInPolygon(unittest.TestCase):
    """Test the crossing-number containment test."""

    def test_degenerate_polygons(self):
        for vertices in ([], [Point2D(5, 5)]):
            with self.subTest(vertices=vertices):
                self.assertFalse(point_in_polygon(Point2D(5, 5), vertices))
                self.assertFalse(point_in_polygon(Point2D(0, 0), vertices))

    def test_two_vertices_contain_nothing(self):
        segment = [Point2D(0, 0), Point2D(10, 10)]
        self.assertFalse(point_in_polygon(Point2D(5, 5), segment))
        self.assertFalse(point_in_polygon(Point2D(2, 8), segment))

    def test_square(self):
        self.assertTrue(point_in_polygon(Point2D(5, 5), SQUARE))
        self.assertFalse(point_in_polygon(Point2D(15, 5), SQUARE))
        self.assertFalse(point_in_polygon(Point2D(-1, 5), SQUARE))
        self.assertFalse(point_in_polygon(Point2D(5, 11), SQUARE))

    def test_closing_edge(self):
        """The edge from the last vertex back to the first counts."""
        triangle = [Point2D(0, 0), Point2D(10, 5), Point2D(0, 10)]
        self.assertTrue(point_in_polygon(Point2D(2, 5), triangle))
        self.assertFalse(point_in_polygon(Point2D(-2, 5), triangle))

    def test_winding_order_independent(self):
        self.assertTrue(point_in_polygon(Point2D(5, 5), list(reversed(SQUARE))))

    def test_concave(self):
        # U shape opening upward
        u_shape = [Point2D(0, 0), Point2D(30, 0), Point2D(30, 30), Point2D(20, 30),
                   Point2D(20, 10), Point2D(10, 10), Point2D(10, 30), Point2D(0, 30)]
        self.assertTrue(point_in_polygon(Point2D(5, 20), u_shape))
        self.assertFalse(point_in_polygon(Point2D(15, 20), u_shape))
        self.assertTrue(point_in_polygon(Point2D(15, 5), u_shape))

    def test_self_intersecting_bowtie(self):
        """Both lobes of a bow tie count as inside, the gap between them does not."""
        bowtie = [Point2D(0, 0), Point2D(10, 10), Point2D(10, 0), Point2D(0, 10)]
        self.assertTrue(point_in_polygon(Point2D(1, 5), bowtie))
        self.assertTrue(point_in_polygon(Point2D(9, 5), bowtie))
        self.assertFalse(point_in_polygon(Point2D(5, 2), bowtie))


if __name__ == '__main__':
    unittest.main()
