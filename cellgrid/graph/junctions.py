"""
Grid Graph Builder
==================
Derives the junction graph from an arrangement: every junction point
knows its nearest neighbor upward (along a vertical edge) and its nearest
neighbor rightward (along a horizontal edge).

Junctions closer than the threshold are one node. Points are mapped to
representatives through a bucket grid of side ``threshold``, so any
equivalent representative lies in the 3x3 bucket neighborhood.
"""

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import List, Tuple, Dict, Set, Optional, Iterable, Callable

from ..types import Edge, Point, THRESHOLD
from ..arrangement import intersection_params


@dataclass
class GraphConfig:
    """Configuration for junction graph construction"""
    threshold: float = THRESHOLD
    debug: bool = False


class JunctionGraph:
    """
    Index-based adjacency table over canonical junction points.

    Node ids are stable integers in discovery order. ``up`` and ``right``
    map a node id to at most one neighbor id.
    """

    UP = 1     # compare y
    RIGHT = 0  # compare x

    def __init__(self, threshold: float = THRESHOLD):
        self.threshold = threshold
        self.points: List[Point] = []
        self.up: Dict[int, int] = {}
        self.right: Dict[int, int] = {}
        self.raw_points: Set[Point] = set()
        self._buckets: Dict[Tuple[int, int], List[int]] = defaultdict(list)

    def __len__(self) -> int:
        return len(self.points)

    def __contains__(self, point: Point) -> bool:
        return self.find(point) is not None

    def nodes(self) -> range:
        return range(len(self.points))

    def point(self, node: int) -> Point:
        return self.points[node]

    def up_of(self, node: int) -> Optional[int]:
        return self.up.get(node)

    def right_of(self, node: int) -> Optional[int]:
        return self.right.get(node)

    def _bucket(self, point: Point) -> Tuple[int, int]:
        return (math.floor(point.x / self.threshold), math.floor(point.y / self.threshold))

    def find(self, point: Point) -> Optional[int]:
        """Lowest node id equivalent to ``point``, or None"""
        bx, by = self._bucket(point)
        best: Optional[int] = None
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                for node in self._buckets.get((bx + dx, by + dy), ()):
                    if best is not None and node >= best:
                        continue
                    if point.is_equivalent(self.points[node], self.threshold):
                        best = node
        return best

    def node_for(self, point: Point) -> int:
        """Representative node for ``point``, created if none is equivalent"""
        self.raw_points.add(point)
        node = self.find(point)
        if node is not None:
            return node
        node = len(self.points)
        self.points.append(point)
        self._buckets[self._bucket(point)].append(node)
        return node

    def add_up(self, lower: Point, upper: Point) -> bool:
        return self._add_link(self.up, self.UP, lower, upper)

    def add_right(self, left: Point, right: Point) -> bool:
        return self._add_link(self.right, self.RIGHT, left, right)

    def _add_link(self, links: Dict[int, int], axis: int, src: Point, dst: Point) -> bool:
        """
        Record src -> dst. A node keeps only its nearest neighbor in each
        direction; links that merged into a self-loop or point backwards
        are dropped.
        """
        a = self.node_for(src)
        b = self.node_for(dst)
        gap = self.points[b].as_tuple()[axis] - self.points[a].as_tuple()[axis]
        if a == b or gap <= 0:
            return False
        current = links.get(a)
        if current is not None:
            current_gap = self.points[current].as_tuple()[axis] - self.points[a].as_tuple()[axis]
            if current_gap <= gap:
                return False
        links[a] = b
        return True

    def walk(self, start: Optional[int], links: Dict[int, int]) -> Iterable[int]:
        """Follow ``links`` from ``start``; bounded by the node count"""
        node = start
        steps = 0
        while node is not None and steps <= len(self.points):
            yield node
            node = links.get(node)
            steps += 1


class GridGraphBuilder:
    """
    Build a JunctionGraph from vertical and horizontal arrangement edges.

    For each vertical edge, the crossings with all horizontal edges that
    touch it are sorted by y; consecutive crossings more than a threshold
    apart are linked upward. Horizontal edges are handled the same way
    with rightward links sorted by x.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self.config = config or GraphConfig()

    def build(self, vertical: List[Edge], horizontal: List[Edge]) -> JunctionGraph:
        graph = JunctionGraph(self.config.threshold)

        for v in vertical:
            hits = []
            for h in horizontal:
                point = self._touch_point(v, h)
                if point is not None:
                    hits.append((point.y, point))
            self._link_chain(hits, graph.add_up)

        for h in horizontal:
            hits = []
            for v in vertical:
                point = self._touch_point(h, v)
                if point is not None:
                    hits.append((point.x, point))
            self._link_chain(hits, graph.add_right)

        if self.config.debug:
            print(f"[GRAPH] {len(graph.raw_points)} raw junctions merged into {len(graph)} nodes "
                  f"({len(graph.up)} up, {len(graph.right)} right links)")

        return graph

    def _touch_point(self, a: Edge, b: Edge) -> Optional[Point]:
        """
        Crossing of the two lines, measured along ``a``, if it lies within
        the threshold of both segments.
        """
        params = intersection_params(a, b)
        if params is None:
            return None
        t, u = params
        tol_a = self.config.threshold / a.length
        tol_b = self.config.threshold / b.length
        if not (-tol_a <= t <= 1.0 + tol_a and -tol_b <= u <= 1.0 + tol_b):
            return None
        return a.point_at(t)

    def _link_chain(self, hits: List[Tuple[float, Point]], add_link: Callable[[Point, Point], bool]):
        hits.sort(key=lambda h: h[0])
        for (c0, p0), (c1, p1) in zip(hits, hits[1:]):
            if c1 - c0 > self.config.threshold:
                add_link(p0, p1)


def build_junction_graph(
    vertical: List[Edge],
    horizontal: List[Edge],
    config: Optional[GraphConfig] = None
) -> JunctionGraph:
    """
    Convenience function for graph building.
    """
    return GridGraphBuilder(config).build(vertical, horizontal)
