"""
Page Source Adapter
===================
Converts a pdfplumber page into the operator list and text runs the
pipeline consumes. pdfplumber reports coordinates from the top of the
page; the operator list flips them back into PDF user space (y up) with
a single transform, so cells come out with bottom < top.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Tuple, Optional, Sequence

from ..types import TextRun
from ..paths import Ops, construct_path
from ..exceptions import PageSourceError, PDFNotReadable, PageOutOfRange


@dataclass
class PageContent:
    """
    Decoded drawing content of one page.
    """
    page_number: int  # 1-indexed
    width: float
    height: float
    operators: List[Tuple[str, Any]] = field(default_factory=list)
    text_runs: List[TextRun] = field(default_factory=list)

    @property
    def path_count(self) -> int:
        """Number of rectangle / path operators"""
        return sum(1 for op, _ in self.operators if op in (Ops.RECTANGLE, Ops.CONSTRUCT_PATH))


def _points(raw: Any) -> List[Tuple[float, float]]:
    """Normalize a pdfplumber point list to (x, top) tuples"""
    pts = []
    for p in raw or []:
        pts.append((float(p[0]), float(p[1])))
    return pts


def _polyline(pts: Sequence[Tuple[float, float]]) -> Optional[Tuple[str, Any]]:
    if len(pts) < 2:
        return None
    sub_ops = [Ops.MOVE_TO] + [Ops.LINE_TO] * (len(pts) - 1)
    sub_args = [v for p in pts for v in p]
    return construct_path(sub_ops, sub_args)


def line_operator(line: Dict[str, Any]) -> Optional[Tuple[str, Any]]:
    """constructPath for a pdfplumber line object"""
    pts = _points(line.get('pts'))
    if len(pts) < 2:
        pts = [(line.get('x0', 0), line.get('top', 0)), (line.get('x1', 0), line.get('bottom', 0))]
    return _polyline(pts)


def curve_operator(curve: Dict[str, Any]) -> Optional[Tuple[str, Any]]:
    """
    constructPath for a pdfplumber curve object.

    Uses the ``path`` commands when present (m / l / c / h); Bezier
    segments only move the current point.
    """
    path = curve.get('path')
    if not path:
        return _polyline(_points(curve.get('pts')))

    sub_ops: List[str] = []
    sub_args: List[float] = []
    for cmd in path:
        kind, points = cmd[0], _points(cmd[1:])
        if kind == 'm' and len(points) == 1:
            sub_ops.append(Ops.MOVE_TO)
        elif kind == 'l' and len(points) == 1:
            sub_ops.append(Ops.LINE_TO)
        elif kind == 'c' and len(points) == 3:
            sub_ops.append(Ops.CURVE_TO)
        elif kind == 'h':
            sub_ops.append(Ops.CLOSE_PATH)
        else:
            continue
        sub_args.extend(v for p in points for v in p)

    if not sub_ops:
        return None
    return construct_path(sub_ops, sub_args)


def rect_operator(rect: Dict[str, Any]) -> Tuple[str, Any]:
    """rectangle for a pdfplumber rect object"""
    return (Ops.RECTANGLE, [rect.get('x0', 0), rect.get('top', 0), rect.get('width', 0), rect.get('height', 0)])


def build_page_content(page: Any, page_number: Optional[int] = None) -> PageContent:
    """
    Build PageContent from a pdfplumber page.

    Args:
        page: pdfplumber Page
        page_number: 1-indexed page number (defaults to page.page_number)

    Returns:
        PageContent with operators in pdfplumber object order
        (rects, lines, curves) and one text run per word
    """
    height = float(page.height or 0.0)
    width = float(page.width or 0.0)
    if page_number is None:
        page_number = getattr(page, 'page_number', 1)

    operators: List[Tuple[str, Any]] = [
        (Ops.SAVE, []),
        (Ops.TRANSFORM, [1, 0, 0, -1, 0, height]),
    ]
    for rect in page.rects or []:
        operators.append(rect_operator(rect))
    for line in page.lines or []:
        op = line_operator(line)
        if op is not None:
            operators.append(op)
    for curve in page.curves or []:
        op = curve_operator(curve)
        if op is not None:
            operators.append(op)
    operators.append((Ops.RESTORE, []))

    # Anchor each word at its lower-left corner in PDF user space
    text_runs = [
        TextRun(w.get('text', ''), (1.0, 0.0, 0.0, 1.0, float(w.get('x0', 0)), height - float(w.get('bottom', 0))))
        for w in page.extract_words()
    ]

    return PageContent(
        page_number=page_number,
        width=width,
        height=height,
        operators=operators,
        text_runs=text_runs,
    )


def load_page_content(pdf_path: str, page_number: int = 1) -> PageContent:
    """
    Open ``pdf_path`` with pdfplumber and build the content of one page.

    Raises:
        PDFNotReadable: the file is missing or not a readable PDF
        PageOutOfRange: ``page_number`` is not in the document
    """
    import pdfplumber

    try:
        with pdfplumber.open(pdf_path) as pdf:
            total = len(pdf.pages)
            if not 1 <= page_number <= total:
                raise PageOutOfRange(f"Page {page_number} not in document ({total} pages): {pdf_path}")
            return build_page_content(pdf.pages[page_number - 1], page_number)
    except PageSourceError:
        raise
    except Exception as e:
        raise PDFNotReadable(f"Cannot read {pdf_path}: {e}") from e
