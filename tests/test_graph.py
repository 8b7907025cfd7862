"""
Tests for the junction graph
"""

import unittest
import sys
import os
from itertools import combinations

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cellgrid.arrangement import build_arrangement
from cellgrid.edges import normalize_edges
from cellgrid.graph import JunctionGraph, GridGraphBuilder, GraphConfig, build_junction_graph
from cellgrid.types import Point, edges_from_coords

from tests.helpers import grid_edges


def graph_for(edges, config=None):
    split = normalize_edges(build_arrangement(edges))
    return build_junction_graph(split.vertical, split.horizontal, config)


class TestJunctionGraph(unittest.TestCase):

    def test_representative_remap(self):
        graph = JunctionGraph()
        a = graph.node_for(Point(10, 10))
        self.assertEqual(graph.node_for(Point(11, 11)), a)
        self.assertEqual(graph.node_for(Point(9.5, 10.2)), a)
        b = graph.node_for(Point(13, 10))
        self.assertNotEqual(a, b)
        self.assertEqual(len(graph), 2)
        self.assertEqual(len(graph.raw_points), 4)

    def test_remap_across_bucket_boundary(self):
        graph = JunctionGraph(threshold=2.0)
        a = graph.node_for(Point(3.9, 3.9))
        self.assertEqual(graph.node_for(Point(4.1, 4.1)), a)

    def test_nearest_link_kept(self):
        graph = JunctionGraph()
        graph.add_up(Point(0, 0), Point(0, 100))
        graph.add_up(Point(0.5, 0), Point(0.5, 40))
        graph.add_up(Point(0, 0), Point(0, 60))
        self.assertEqual(graph.point(graph.up_of(0)), Point(0.5, 40))

    def test_backward_and_self_links_dropped(self):
        graph = JunctionGraph()
        self.assertFalse(graph.add_right(Point(0, 0), Point(1, 0)))
        self.assertFalse(graph.add_right(Point(50, 0), Point(10, 0)))
        self.assertEqual(graph.right, {})


class TestGridGraphBuilder(unittest.TestCase):

    def test_single_cell_links(self):
        graph = graph_for(edges_from_coords([
            [0, 0, 100, 0],
            [100, 0, 100, 50],
            [100, 50, 0, 50],
            [0, 50, 0, 0],
        ]))
        self.assertEqual(len(graph), 4)
        lb = graph.find(Point(0, 0))
        self.assertEqual(graph.point(graph.up_of(lb)), Point(0, 50))
        self.assertEqual(graph.point(graph.right_of(lb)), Point(100, 0))
        self.assertIsNone(graph.up_of(graph.find(Point(0, 50))))
        self.assertIsNone(graph.right_of(graph.find(Point(100, 0))))

    def test_grid_keys_non_equivalent(self):
        graph = graph_for(grid_edges())
        for a, b in combinations(graph.points, 2):
            self.assertFalse(a.is_equivalent(b))
        # 2 + 3 + 6 + 6 junctions on x = 0, 100, 200, 300
        self.assertEqual(len(graph), 17)

    def test_restroked_line_merged(self):
        # The middle ruling is drawn as two strokes 0.6 apart
        vertical = edges_from_coords([
            [0, 0, 0, 100],
            [0.6, 100, 0.6, 200],
        ])
        horizontal = edges_from_coords([
            [0, 0, 100, 0],
            [0, 100, 100, 100],
            [0, 200, 100, 200],
        ])
        graph = build_junction_graph(vertical, horizontal)
        lb = graph.find(Point(0, 0))
        mid = graph.up_of(lb)
        self.assertEqual(mid, graph.find(Point(0.6, 100)))
        self.assertEqual(graph.point(graph.up_of(mid)), Point(0.6, 200))

    def test_close_crossings_coalesced(self):
        # Two horizontals 1 unit apart cross the same vertical
        vertical = edges_from_coords([[0, 0, 0, 100]])
        horizontal = edges_from_coords([
            [0, 0, 50, 0],
            [0, 1, 50, 1],
            [0, 100, 50, 100],
        ])
        graph = GridGraphBuilder(GraphConfig()).build(vertical, horizontal)
        self.assertEqual(len(graph.up), 1)
        src, dst = next(iter(graph.up.items()))
        self.assertEqual(graph.point(dst), Point(0, 100))
        self.assertTrue(graph.point(src).is_equivalent(Point(0, 0)))

    def test_gap_within_threshold_touches(self):
        # Horizontal stops 1.5 units short of the vertical
        vertical = edges_from_coords([[100, 0, 100, 50]])
        horizontal = edges_from_coords([[0, 0, 98.5, 0], [0, 50, 100, 50]])
        graph = build_junction_graph(vertical, horizontal)
        self.assertIsNotNone(graph.up_of(graph.find(Point(100, 0))))

    def test_walk_bounded(self):
        graph = graph_for(grid_edges())
        start = graph.find(Point(200, 0))
        chain = [graph.point(n).y for n in graph.walk(start, graph.up)]
        self.assertEqual([round(y) for y in chain], [0, 100, 200, 300, 400, 500])


if __name__ == "__main__":
    unittest.main()
