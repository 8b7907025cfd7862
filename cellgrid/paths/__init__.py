"""
Path Interpreter Module
=======================
Turns drawing operators (save/restore/transform/moveTo/lineTo/rectangle/
constructPath) into world-space line segments.
"""

from .interpreter import (
    Ops, PathConfig, PathInterpreter, iter_segments, construct_path, SUB_OP_ARITY
)

__all__ = ['Ops', 'PathConfig', 'PathInterpreter', 'iter_segments', 'construct_path', 'SUB_OP_ARITY']
