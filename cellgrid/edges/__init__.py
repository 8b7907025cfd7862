"""
Edge Normalizer Module
======================
Vertical / horizontal classification of drawn segments.
"""

from .normalizer import EdgeNormalizer, NormalizerConfig, NormalizedEdges, normalize_edges

__all__ = ['EdgeNormalizer', 'NormalizerConfig', 'NormalizedEdges', 'normalize_edges']
