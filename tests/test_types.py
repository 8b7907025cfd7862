"""
Tests for the shared geometry types
"""

import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cellgrid.types import (
    Point, Edge, Rect, TextRun, TextRect, IDENTITY, THRESHOLD,
    multiply, apply_matrix, to_numbers,
)


class TestPointEdge(unittest.TestCase):

    def test_point_equivalence(self):
        self.assertTrue(Point(0, 0).is_equivalent(Point(1, 1)))
        self.assertFalse(Point(0, 0).is_equivalent(Point(2, 0)))  # distance == threshold
        self.assertTrue(Point(0, 0).is_equivalent(Point(0.5, 0), threshold=1.0))

    def test_edge_orientation(self):
        self.assertTrue(Edge.from_coords(10, 0, 11.5, 100).is_vertical())
        self.assertFalse(Edge.from_coords(10, 0, 12, 100).is_vertical())
        self.assertTrue(Edge.from_coords(0, 5, 100, 6).is_horizontal())

    def test_edge_equivalence_either_order(self):
        a = Edge.from_coords(0, 0, 0, 100)
        self.assertTrue(a.is_equivalent(Edge.from_coords(0.5, 100.5, 0, 0)))
        self.assertFalse(a.is_equivalent(Edge.from_coords(0, 0, 0, 90)))

    def test_degenerate(self):
        self.assertTrue(Edge.from_coords(5, 5, 6, 6).is_degenerate())
        self.assertFalse(Edge.from_coords(5, 5, 5, 8).is_degenerate())

    def test_point_at(self):
        e = Edge.from_coords(0, 0, 200, 100)
        self.assertEqual(e.point_at(0.5), Point(100, 50))


class TestRect(unittest.TestCase):

    def test_sides_and_area(self):
        r = Rect(Point(10, 20), Point(110, 70))
        self.assertEqual((r.left, r.bottom, r.right, r.top), (10, 20, 110, 70))
        self.assertEqual(r.area, 5000)
        self.assertTrue(r.is_well_formed())
        self.assertFalse(Rect(Point(10, 20), Point(5, 70)).is_well_formed())

    def test_contains_is_inclusive(self):
        r = Rect(Point(0, 0), Point(100, 50))
        self.assertTrue(r.contains(Point(0, 0)))
        self.assertTrue(r.contains(Point(100, 50)))
        self.assertFalse(r.contains(Point(100.01, 25)))


class TestTextTypes(unittest.TestCase):

    def test_anchor_from_transform(self):
        run = TextRun("Total", (12, 0, 0, 12, 55.5, 300.25))
        self.assertEqual(run.anchor, Point(55.5, 300.25))

    def test_coerce(self):
        self.assertEqual(TextRun.coerce(("a", [1, 0, 0, 1, 3, 4])).anchor, Point(3, 4))
        self.assertEqual(TextRun.coerce({"str": "b", "transform": [1, 0, 0, 1, 5, 6]}).text, "b")
        run = TextRun.at("c", 1, 2)
        self.assertIs(TextRun.coerce(run), run)

    def test_text_rect_output(self):
        tr = TextRect(Rect(Point(0, 0), Point(10, 20)), ["x", "y"])
        self.assertEqual(tr.text, "x y")
        self.assertFalse(tr.is_empty())
        self.assertEqual(tr.as_dict(), {"left": 0, "bottom": 0, "right": 10, "top": 20, "strings": ["x", "y"]})


class TestMatrixHelpers(unittest.TestCase):

    def test_identity(self):
        m = (2, 0, 0, 3, 5, 7)
        self.assertEqual(multiply(IDENTITY, m), m)
        self.assertEqual(multiply(m, IDENTITY), m)

    def test_new_matrix_applies_first(self):
        scale = (2, 0, 0, 2, 0, 0)
        shift = (1, 0, 0, 1, 10, 0)
        # scale after shift: (0,0) -> (10,0) -> (20,0)
        self.assertEqual(apply_matrix(multiply(scale, shift), 0, 0), Point(20, 0))

    def test_to_numbers(self):
        self.assertEqual(to_numbers([1, "2"], 2), (1.0, 2.0))
        self.assertIsNone(to_numbers([1], 2))
        self.assertIsNone(to_numbers(["x", 1], 2))
        self.assertIsNone(to_numbers(None, 2))
        self.assertIsNone(to_numbers([float("nan"), 1], 2))


if __name__ == "__main__":
    unittest.main()
