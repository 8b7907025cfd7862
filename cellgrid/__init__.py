"""
Cell Grid Engine
================
Table-cell recovery from vector-drawn page grids.

Architecture:
- paths: Drawing operators -> world-space segments (transform stack)
- edges: Vertical / horizontal classification, diagonals dropped
- arrangement: Crossing resolution into atomic, non-overlapping edges
- graph: Junction graph with nearest up / right neighbors
- cells: Minimal rectangle enumeration over the graph
- binding: Text runs attached to the cell containing their anchor
- page_source: pdfplumber adapter producing operators and text runs

Usage:
    from cellgrid import CellPipeline
    pipeline = CellPipeline()
    text_rects, debug = pipeline.run(operators, text_runs)
"""

from .types import (
    Point,
    Edge,
    Rect,
    TextRun,
    TextRect,
    THRESHOLD,
    EPSILON,
)
from .paths import Ops
from .pipeline import CellPipeline, PipelineConfig, DebugBundle, extract_page_cells
from .exceptions import PageSourceError, PDFNotReadable, PageOutOfRange

__all__ = [
    'Point',
    'Edge',
    'Rect',
    'TextRun',
    'TextRect',
    'THRESHOLD',
    'EPSILON',
    'Ops',
    'CellPipeline',
    'PipelineConfig',
    'DebugBundle',
    'extract_page_cells',
    'PageSourceError',
    'PDFNotReadable',
    'PageOutOfRange',
]

__version__ = '1.0.0'
