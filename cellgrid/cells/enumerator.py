"""
Cell Enumerator
===============
Walks the junction graph and closes the minimal rectangle that starts at
each bottom-left corner.
"""

from dataclasses import dataclass
from typing import List, Optional, Iterator

from ..types import Rect, MIN_RECT_AREA
from ..graph import JunctionGraph


@dataclass
class CellConfig:
    """Configuration for cell enumeration"""
    min_area: float = MIN_RECT_AREA
    debug: bool = False


class CellEnumerator:
    """
    Enumerate minimal cells from a JunctionGraph.

    For a node ``lb`` with both an up and a right link:
    1. rb: first node with an up link along the right chain from lb.right
    2. lt: first node with a right link along the up chain from lb.up
    3. rt: first node along the right chain from lt.right that lies on
       the up chain of rb

    Every walk follows the single recorded link, so the first match wins.
    An open boundary (a walk running off the graph) yields no cell.
    """

    def __init__(self, config: Optional[CellConfig] = None):
        self.config = config or CellConfig()
        self.open_corners = 0
        self.too_small = 0

    def enumerate(self, graph: JunctionGraph) -> List[Rect]:
        self.open_corners = 0
        self.too_small = 0
        rects = list(self.iter_rects(graph))

        if self.config.debug:
            print(f"[CELLS] {len(rects)} cells, {self.open_corners} open corners, "
                  f"{self.too_small} below min area")

        return rects

    def iter_rects(self, graph: JunctionGraph) -> Iterator[Rect]:
        for lb in graph.nodes():
            if graph.up_of(lb) is None or graph.right_of(lb) is None:
                continue

            rt = self.close_from(graph, lb)
            if rt is None:
                self.open_corners += 1
                continue

            rect = Rect(graph.point(lb), graph.point(rt))
            if not rect.is_well_formed() or rect.area <= self.config.min_area:
                self.too_small += 1
                continue
            yield rect

    def close_from(self, graph: JunctionGraph, lb: int) -> Optional[int]:
        """Top-right node of the cell whose bottom-left is ``lb``, or None"""
        rb = self._first(graph.walk(graph.right_of(lb), graph.right), graph.up)
        if rb is None:
            return None
        lt = self._first(graph.walk(graph.up_of(lb), graph.up), graph.right)
        if lt is None:
            return None

        right_side = set(graph.walk(graph.up_of(rb), graph.up))
        for node in graph.walk(graph.right_of(lt), graph.right):
            if node in right_side:
                return node
        return None

    @staticmethod
    def _first(chain: Iterator[int], links: dict) -> Optional[int]:
        for node in chain:
            if node in links:
                return node
        return None


def enumerate_cells(
    graph: JunctionGraph,
    config: Optional[CellConfig] = None
) -> List[Rect]:
    """
    Convenience function for cell enumeration.
    """
    return CellEnumerator(config).enumerate(graph)
