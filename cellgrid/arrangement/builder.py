"""
Arrangement Builder
===================
Resolves every crossing between drawn segments by splitting, until the
edge set is planar: no two edges cross at an interior point, no two edges
are equivalent and no edge has zero length.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import List, Tuple, Dict, Optional, Iterable

from ..types import Edge, Point, THRESHOLD, EPSILON, MAX_ARRANGEMENT_PASSES


# Relative cross-product magnitude below which two segments are parallel
PARALLEL_TOLERANCE = 1e-9

# Parameters this close to 0 or 1 are at the endpoint, not inside
PARAM_TOLERANCE = 1e-9


@dataclass
class ArrangementConfig:
    """Configuration for the arrangement builder"""
    threshold: float = THRESHOLD  # point equivalence
    epsilon: float = EPSILON      # parameter slack at touching endpoints
    max_passes: int = MAX_ARRANGEMENT_PASSES
    debug: bool = False


def is_interior(t: float) -> bool:
    """Parameter strictly inside (0, 1)"""
    return PARAM_TOLERANCE < t < 1.0 - PARAM_TOLERANCE


def intersection_params(a: Edge, b: Edge) -> Optional[Tuple[float, float]]:
    """
    Solve ``a.start + t*(a.end-a.start) == b.start + u*(b.end-b.start)``.

    Returns:
        (t, u), or None when the segments are parallel or collinear
    """
    rx, ry = a.dx, a.dy
    sx, sy = b.dx, b.dy
    denom = rx * sy - ry * sx
    if abs(denom) <= PARALLEL_TOLERANCE * a.length * b.length:
        return None

    qx = b.start.x - a.start.x
    qy = b.start.y - a.start.y
    t = (qx * sy - qy * sx) / denom
    u = (qx * ry - qy * rx) / denom
    return t, u


class ArrangementBuilder:
    """
    Split crossing edges into atomic fragments.

    Process (repeated until a pass changes nothing):
    1. Drop zero-length edges and edges equivalent to an earlier one
    2. Find every crossing between pairs of edges
    3. Split each edge at the crossings interior to it
    """

    def __init__(self, config: Optional[ArrangementConfig] = None):
        self.config = config or ArrangementConfig()
        self.passes = 0
        self.crossings = 0

    def build(self, edges: Iterable[Edge]) -> List[Edge]:
        """
        Build the arrangement.

        Args:
            edges: Input segments (any orientation)

        Returns:
            Planar list of edges. Edges that are never split keep their
            relative order.
        """
        self.passes = 0
        self.crossings = 0
        work = self._filter(list(edges))

        while self.passes < self.config.max_passes:
            self.passes += 1
            split = self._filter(self._split_pass(work))
            if split == work:
                break
            work = split
        else:
            if self.config.debug:
                print(f"[ARRANGE] Stopped after {self.passes} passes without reaching a fixed point")

        if self.config.debug:
            print(f"[ARRANGE] {len(work)} edges after {self.passes} passes ({self.crossings} crossings)")

        return work

    def is_crossing(self, t: float, u: float) -> bool:
        """
        A crossing needs one parameter strictly inside (0, 1) and the other
        within [-epsilon, 1 + epsilon].
        """
        eps = self.config.epsilon
        if not (is_interior(t) or is_interior(u)):
            return False
        return -eps <= t <= 1.0 + eps and -eps <= u <= 1.0 + eps

    def _filter(self, edges: List[Edge]) -> List[Edge]:
        """Drop zero-length and duplicate edges (first occurrence wins)"""
        threshold = self.config.threshold
        kept: List[Edge] = []
        for edge in edges:
            if edge.is_degenerate(threshold):
                continue
            if any(edge.is_equivalent(other, threshold) for other in kept):
                continue
            kept.append(edge)
        return kept

    def _split_pass(self, edges: List[Edge]) -> List[Edge]:
        cuts: Dict[int, List[Tuple[float, Point]]] = defaultdict(list)

        for i in range(len(edges)):
            for j in range(i + 1, len(edges)):
                params = intersection_params(edges[i], edges[j])
                if params is None:
                    continue
                t, u = params
                if not self.is_crossing(t, u):
                    continue

                # One shared point so both fragments meet exactly
                point = edges[i].point_at(t)
                if is_interior(t):
                    cuts[i].append((t, point))
                if is_interior(u):
                    cuts[j].append((u, point))
                self.crossings += 1

        if not cuts:
            return list(edges)

        result: List[Edge] = []
        for i, edge in enumerate(edges):
            if i not in cuts:
                result.append(edge)
                continue
            prev = edge.start
            for _, point in sorted(cuts[i], key=lambda c: c[0]):
                result.append(Edge(prev, point))
                prev = point
            result.append(Edge(prev, edge.end))
        return result


def build_arrangement(
    edges: Iterable[Edge],
    config: Optional[ArrangementConfig] = None
) -> List[Edge]:
    """
    Convenience function for arrangement building.
    """
    return ArrangementBuilder(config).build(edges)


def find_crossings(
    edges: List[Edge],
    config: Optional[ArrangementConfig] = None
) -> List[Tuple[int, int]]:
    """
    Index pairs of edges that cross at a point interior to both.
    Empty for a valid arrangement.
    """
    pairs: List[Tuple[int, int]] = []
    for i in range(len(edges)):
        for j in range(i + 1, len(edges)):
            params = intersection_params(edges[i], edges[j])
            if params is None:
                continue
            t, u = params
            if is_interior(t) and is_interior(u):
                pairs.append((i, j))
    return pairs
