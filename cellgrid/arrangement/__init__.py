"""
Arrangement Module
==================
Planar arrangement of drawn edges: every crossing split, duplicates and
zero-length fragments removed.
"""

from .builder import (
    ArrangementBuilder, ArrangementConfig, build_arrangement, intersection_params, find_crossings, is_interior
)

__all__ = [
    'ArrangementBuilder', 'ArrangementConfig', 'build_arrangement',
    'intersection_params', 'find_crossings', 'is_interior',
]
