"""
Path Interpreter
================
Walks a page's drawing operator stream and emits world-space segments.
Tracks the transform stack and the current point the way a PDF content
stream does for path construction.
"""

from dataclasses import dataclass
from typing import List, Tuple, Any, Optional, Iterable, Iterator, Sequence

from ..types import (
    Edge, Point, Matrix, IDENTITY, multiply, apply_matrix, to_numbers
)


class Ops:
    """Operator names understood by the interpreter"""
    SAVE = "save"
    RESTORE = "restore"
    TRANSFORM = "transform"
    MOVE_TO = "moveTo"
    LINE_TO = "lineTo"
    RECTANGLE = "rectangle"
    CONSTRUCT_PATH = "constructPath"

    # Sub-operators that may appear inside constructPath
    CLOSE_PATH = "closePath"
    CURVE_TO = "curveTo"
    CURVE_TO2 = "curveTo2"
    CURVE_TO3 = "curveTo3"


# Number of flat arguments each sub-operator consumes inside constructPath
SUB_OP_ARITY = {
    Ops.MOVE_TO: 2,
    Ops.LINE_TO: 2,
    Ops.RECTANGLE: 4,
    Ops.CLOSE_PATH: 0,
    Ops.CURVE_TO: 6,
    Ops.CURVE_TO2: 4,
    Ops.CURVE_TO3: 4,
}

Operator = Tuple[str, Any]


@dataclass
class PathConfig:
    """Configuration for path interpretation"""
    debug: bool = False


class PathInterpreter:
    """
    Interpret path construction operators into Edges.

    Each call to ``iter_segments`` starts from a pristine (identity)
    transform and no current point, so one interpreter can serve any
    number of pages.
    """

    def __init__(self, config: Optional[PathConfig] = None):
        self.config = config or PathConfig()
        self._reset()

    def _reset(self):
        self.matrix: Matrix = IDENTITY
        self.stack: List[Matrix] = []
        self.current: Optional[Point] = None
        self.subpath_start: Optional[Point] = None
        self.skipped = 0

    def iter_segments(self, operators: Iterable[Operator]) -> Iterator[Edge]:
        """
        Lazily yield segments in operator order.

        Args:
            operators: ``(opcode, args)`` pairs

        Yields:
            Edge in world (page) space
        """
        self._reset()
        for item in operators:
            try:
                op, args = item
            except (TypeError, ValueError):
                self.skipped += 1
                continue

            if op == Ops.SAVE:
                self.stack.append(self.matrix)
            elif op == Ops.RESTORE:
                if self.stack:
                    self.matrix = self.stack.pop()
            elif op == Ops.TRANSFORM:
                values = to_numbers(args, 6)
                if values is None:
                    self.skipped += 1
                    continue
                self.matrix = multiply(self.matrix, values)
            elif op == Ops.CONSTRUCT_PATH:
                yield from self._construct_path(args)
            elif op in (Ops.MOVE_TO, Ops.LINE_TO, Ops.RECTANGLE):
                values = to_numbers(args, SUB_OP_ARITY[op])
                if values is None:
                    self.skipped += 1
                    continue
                yield from self._path_op(op, values)

        if self.config.debug and self.skipped:
            print(f"[PATHS] Skipped {self.skipped} malformed operators")

    def _construct_path(self, args: Any) -> Iterator[Edge]:
        """Run the nested (sub_ops, flat_args) stream of a constructPath"""
        try:
            sub_ops, sub_args = list(args[0]), list(args[1])
        except (TypeError, IndexError, KeyError):
            self.skipped += 1
            return

        pos = 0
        for op in sub_ops:
            arity = SUB_OP_ARITY.get(op) if isinstance(op, str) else None
            if arity is None:
                # Unknown arity: the rest of the flat array can't be aligned
                self.skipped += 1
                return
            values = to_numbers(sub_args[pos:pos + arity], arity)
            pos += arity
            if values is None:
                self.skipped += 1
                continue
            yield from self._path_op(op, values)

    def _path_op(self, op: str, values: Tuple[float, ...]) -> Iterator[Edge]:
        if op == Ops.MOVE_TO:
            self.current = apply_matrix(self.matrix, values[0], values[1])
            self.subpath_start = self.current

        elif op == Ops.LINE_TO:
            point = apply_matrix(self.matrix, values[0], values[1])
            if self.current is not None:
                yield Edge(self.current, point)
            self.current = point

        elif op == Ops.RECTANGLE:
            x, y, w, h = values
            corners = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
            for i in range(4):
                x0, y0 = corners[i]
                x1, y1 = corners[(i + 1) % 4]
                yield Edge(apply_matrix(self.matrix, x0, y0), apply_matrix(self.matrix, x1, y1))
            self.current = apply_matrix(self.matrix, x, y)
            self.subpath_start = self.current

        elif op == Ops.CLOSE_PATH:
            if self.current is not None and self.subpath_start is not None:
                if self.current != self.subpath_start:
                    yield Edge(self.current, self.subpath_start)
                self.current = self.subpath_start

        else:
            # Bezier curves: only the end point matters for later segments
            self.current = apply_matrix(self.matrix, values[-2], values[-1])


def iter_segments(
    operators: Iterable[Operator],
    config: Optional[PathConfig] = None
) -> Iterator[Edge]:
    """
    Convenience function for path interpretation.
    """
    interpreter = PathInterpreter(config)
    return interpreter.iter_segments(operators)


def construct_path(sub_ops: Sequence[str], sub_args: Sequence[float]) -> Operator:
    """Build a constructPath operator from sub-operators and flat arguments"""
    return (Ops.CONSTRUCT_PATH, [list(sub_ops), list(sub_args)])
