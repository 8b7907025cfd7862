"""
Edge Normalizer
===============
Classifies raw segments as vertical or horizontal and puts them in
canonical direction. Diagonal segments are dropped.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Iterable

from ..types import Edge, THRESHOLD


@dataclass
class NormalizerConfig:
    """Configuration for edge normalization"""
    threshold: float = THRESHOLD


@dataclass
class NormalizedEdges:
    """
    Result of normalization.

    Attributes:
        vertical: Edges with start below end
        horizontal: Edges with start left of end
        discarded: Number of diagonal segments dropped
    """
    vertical: List[Edge] = field(default_factory=list)
    horizontal: List[Edge] = field(default_factory=list)
    discarded: int = 0

    @property
    def all_edges(self) -> List[Edge]:
        """Verticals then horizontals, input order kept within each"""
        return self.vertical + self.horizontal

    @property
    def count(self) -> int:
        return len(self.vertical) + len(self.horizontal)


class EdgeNormalizer:
    """
    Sort segments into vertical and horizontal edges.

    A segment counts as vertical when its x extent is below the threshold,
    otherwise as horizontal when its y extent is, otherwise it is diagonal.
    """

    def __init__(self, config: Optional[NormalizerConfig] = None):
        self.config = config or NormalizerConfig()

    def normalize(self, segments: Iterable[Edge]) -> NormalizedEdges:
        result = NormalizedEdges()
        threshold = self.config.threshold

        for seg in segments:
            if seg.is_vertical(threshold):
                result.vertical.append(seg if seg.start.y <= seg.end.y else seg.reversed())
            elif seg.is_horizontal(threshold):
                result.horizontal.append(seg if seg.start.x <= seg.end.x else seg.reversed())
            else:
                result.discarded += 1

        return result


def normalize_edges(
    segments: Iterable[Edge],
    config: Optional[NormalizerConfig] = None
) -> NormalizedEdges:
    """
    Convenience function for normalization.
    """
    return EdgeNormalizer(config).normalize(segments)
