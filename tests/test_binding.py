"""
Tests for text binding
"""

import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cellgrid.binding import TextBinder, BinderConfig, bind_text
from cellgrid.types import Point, Rect, TextRun, TextRect


def rect(x0, y0, x1, y1):
    return Rect(Point(x0, y0), Point(x1, y1))


class TestTextBinder(unittest.TestCase):

    def setUp(self):
        self.left = rect(0, 0, 100, 50)
        self.right = rect(100, 0, 200, 50)

    def test_anchor_inside(self):
        result = bind_text([self.left], [TextRun.at("Total", 10, 20)])
        self.assertEqual(len(result), 1)
        self.assertIsInstance(result[0], TextRect)
        self.assertEqual(result[0].strings, ["Total"])
        self.assertEqual(result[0].rect, self.left)

    def test_boundary_is_inclusive(self):
        result = bind_text([self.left], [TextRun.at("edge", 100, 50)])
        self.assertEqual(result[0].strings, ["edge"])

    def test_just_outside_is_excluded(self):
        binder = TextBinder()
        result = binder.bind([self.left], [TextRun.at("out", 100.01, 25)])
        self.assertEqual(result[0].strings, [])
        self.assertTrue(result[0].is_empty())
        self.assertEqual(binder.unbound, 1)

    def test_shared_boundary_binds_to_both(self):
        result = bind_text([self.left, self.right], [TextRun.at("mid", 100, 25)])
        self.assertEqual([r.strings for r in result], [["mid"], ["mid"]])

    def test_run_order_preserved(self):
        runs = [TextRun.at("b", 50, 10), TextRun.at("a", 20, 40), TextRun.at("c", 90, 5)]
        result = bind_text([self.left], runs)
        self.assertEqual(result[0].strings, ["b", "a", "c"])
        self.assertEqual(result[0].text, "b a c")

    def test_only_translation_used(self):
        # Scale and skew components are ignored
        run = TextRun("scaled", (12.0, 0.0, 3.0, 12.0, 150.0, 25.0))
        result = bind_text([self.left, self.right], [run])
        self.assertEqual(result[0].strings, [])
        self.assertEqual(result[1].strings, ["scaled"])

    def test_mapping_runs(self):
        runs = [{"str": "x", "transform": [1, 0, 0, 1, 10, 10]}, ("y", (1, 0, 0, 1, 110, 10))]
        result = bind_text([self.left, self.right], runs)
        self.assertEqual([r.strings for r in result], [["x"], ["y"]])

    def test_drop_empty(self):
        binder = TextBinder(BinderConfig(drop_empty=True))
        result = binder.bind([self.left, self.right], [TextRun.at("only", 150, 25)])
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].rect, self.right)

    def test_cell_order_preserved(self):
        result = bind_text([self.right, self.left], [])
        self.assertEqual([r.rect for r in result], [self.right, self.left])

    def test_as_dict(self):
        result = bind_text([self.left], [TextRun.at("v", 1, 1)])
        self.assertEqual(result[0].as_dict(), {
            "left": 0, "bottom": 0, "right": 100, "top": 50, "strings": ["v"],
        })


if __name__ == "__main__":
    unittest.main()
