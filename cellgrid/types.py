"""
Unified Data Types for Cell Grid Engine
=======================================
All stages MUST use these types. No custom structures allowed.

Type Hierarchy:
- Point: Page-space coordinate pair (compared with tolerance)
- Edge: Straight segment between two Points
- Rect: Axis-aligned cell rectangle (lower-left, upper-right)
- TextRun: Positioned text string supplied by the page source
- TextRect: Final cell with the strings that fall inside it
"""

import math
from dataclasses import dataclass, field
from typing import Tuple, List, Dict, Any, Optional, Sequence


# ============================================================
# Tolerances
# ============================================================

# Two points closer than this are the same junction (page units)
THRESHOLD = 2.0

# Slack on intersection parameters for endpoint-touching junctions
EPSILON = 0.01

# Smallest cell area kept by the enumerator
MIN_RECT_AREA = THRESHOLD * THRESHOLD

# Upper bound on arrangement splitting passes
MAX_ARRANGEMENT_PASSES = 64

# 2D affine matrix (a, b, c, d, e, f): x' = a*x + c*y + e, y' = b*x + d*y + f
Matrix = Tuple[float, float, float, float, float, float]

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


# ============================================================
# Core Data Structures
# ============================================================

@dataclass(frozen=True)
class Point:
    """
    A coordinate pair in page space.

    Hash and ``==`` use the exact value. Use ``is_equivalent`` wherever
    geometry decides whether two points are "the same".
    """
    x: float
    y: float

    def distance_to(self, other: 'Point') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_equivalent(self, other: 'Point', threshold: float = THRESHOLD) -> bool:
        """True if the points are closer than ``threshold``"""
        return self.distance_to(other) < threshold

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Edge:
    """
    A straight segment from ``start`` to ``end``.

    After normalization an edge is either vertical (start below end) or
    horizontal (start left of end).
    """
    start: Point
    end: Point

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> 'Edge':
        return cls(Point(x0, y0), Point(x1, y1))

    @property
    def dx(self) -> float:
        return self.end.x - self.start.x

    @property
    def dy(self) -> float:
        return self.end.y - self.start.y

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def is_vertical(self, threshold: float = THRESHOLD) -> bool:
        return abs(self.dx) < threshold

    def is_horizontal(self, threshold: float = THRESHOLD) -> bool:
        return abs(self.dy) < threshold

    def is_degenerate(self, threshold: float = THRESHOLD) -> bool:
        """Zero-length edge: start and end are equivalent"""
        return self.start.is_equivalent(self.end, threshold)

    def is_equivalent(self, other: 'Edge', threshold: float = THRESHOLD) -> bool:
        """Both endpoints match within tolerance, in either order"""
        if self.start.is_equivalent(other.start, threshold) and self.end.is_equivalent(other.end, threshold):
            return True
        return self.start.is_equivalent(other.end, threshold) and self.end.is_equivalent(other.start, threshold)

    def reversed(self) -> 'Edge':
        return Edge(self.end, self.start)

    def point_at(self, t: float) -> Point:
        """Point at parameter t (0 = start, 1 = end)"""
        return Point(self.start.x + t * self.dx, self.start.y + t * self.dy)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.start.x, self.start.y, self.end.x, self.end.y)


@dataclass(frozen=True)
class Rect:
    """
    A cell rectangle given by its lower-left and upper-right corners.
    """
    lb: Point
    rt: Point

    @property
    def left(self) -> float:
        return self.lb.x

    @property
    def bottom(self) -> float:
        return self.lb.y

    @property
    def right(self) -> float:
        return self.rt.x

    @property
    def top(self) -> float:
        return self.rt.y

    @property
    def width(self) -> float:
        return self.rt.x - self.lb.x

    @property
    def height(self) -> float:
        return self.rt.y - self.lb.y

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_well_formed(self) -> bool:
        return self.lb.x < self.rt.x and self.lb.y < self.rt.y

    def contains(self, point: Point) -> bool:
        """Inclusive containment test"""
        return (self.left <= point.x <= self.right and
                self.bottom <= point.y <= self.top)


@dataclass(frozen=True)
class TextRun:
    """
    A positioned text string from the page source.

    Attributes:
        text: The string as extracted
        transform: 6-element text matrix; only the translation
            components (indices 4 and 5) are used, as the anchor
    """
    text: str
    transform: Tuple[float, ...] = IDENTITY

    @property
    def anchor(self) -> Point:
        """Baseline origin of the run"""
        return Point(float(self.transform[4]), float(self.transform[5]))

    @classmethod
    def at(cls, text: str, x: float, y: float) -> 'TextRun':
        """Run anchored at (x, y) with an unscaled matrix"""
        return cls(text, (1.0, 0.0, 0.0, 1.0, float(x), float(y)))

    @classmethod
    def coerce(cls, item: Any) -> 'TextRun':
        """
        Accept a TextRun, a ``(text, transform)`` pair, or a dict with
        ``str``/``text`` and ``transform`` keys.
        """
        if isinstance(item, TextRun):
            return item
        if isinstance(item, dict):
            text = item.get('str', item.get('text', ''))
            return cls(str(text), tuple(item.get('transform', IDENTITY)))
        text, transform = item
        return cls(str(text), tuple(transform))


@dataclass
class TextRect:
    """
    A detected cell with the text that falls inside it.
    This is the output type exposed to callers.

    Attributes:
        rect: The cell bounds
        strings: Text of every run anchored inside the cell, in run order
    """
    rect: Rect
    strings: List[str] = field(default_factory=list)

    @property
    def left(self) -> float:
        return self.rect.left

    @property
    def bottom(self) -> float:
        return self.rect.bottom

    @property
    def right(self) -> float:
        return self.rect.right

    @property
    def top(self) -> float:
        return self.rect.top

    @property
    def text(self) -> str:
        """Strings joined with single spaces"""
        return " ".join(self.strings)

    def is_empty(self) -> bool:
        return not self.strings

    def as_dict(self) -> Dict[str, Any]:
        return {
            "left": self.left,
            "bottom": self.bottom,
            "right": self.right,
            "top": self.top,
            "strings": list(self.strings),
        }


# ============================================================
# Helper Functions
# ============================================================

def multiply(m: Matrix, n: Matrix) -> Matrix:
    """
    Compose two affine matrices.

    The result applies ``n`` first and then ``m``, which is how a PDF
    ``cm`` operator updates the current transformation matrix.
    """
    a = m[0] * n[0] + m[2] * n[1]
    b = m[1] * n[0] + m[3] * n[1]
    c = m[0] * n[2] + m[2] * n[3]
    d = m[1] * n[2] + m[3] * n[3]
    e = m[0] * n[4] + m[2] * n[5] + m[4]
    f = m[1] * n[4] + m[3] * n[5] + m[5]
    return (a, b, c, d, e, f)


def apply_matrix(m: Matrix, x: float, y: float) -> Point:
    """Transform (x, y) by m"""
    return Point(m[0] * x + m[2] * y + m[4], m[1] * x + m[3] * y + m[5])


def to_numbers(args: Any, count: int) -> Optional[Tuple[float, ...]]:
    """
    Read exactly ``count`` numbers from an argument list.

    Returns None for a short, long or non-numeric list, so callers can
    skip the operator.
    """
    if args is None:
        return None
    try:
        values = tuple(float(v) for v in args)
    except (TypeError, ValueError):
        return None
    if len(values) != count:
        return None
    if not all(math.isfinite(v) for v in values):
        return None
    return values


def edges_from_coords(coords: Sequence[Sequence[float]]) -> List[Edge]:
    """Build edges from ``[x0, y0, x1, y1]`` rows"""
    return [Edge.from_coords(*row) for row in coords]
