"""
Cell Enumerator Module
======================
Minimal rectangular cells closed over the junction graph.
"""

from .enumerator import CellEnumerator, CellConfig, enumerate_cells

__all__ = ['CellEnumerator', 'CellConfig', 'enumerate_cells']
