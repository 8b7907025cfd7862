"""
Text Binder
===========
Attaches text runs to the cells that contain their anchor points.
"""

from dataclasses import dataclass
from typing import List, Optional, Iterable, Any

from ..types import Rect, TextRun, TextRect


@dataclass
class BinderConfig:
    """Configuration for text binding"""
    drop_empty: bool = False  # omit cells without text


class TextBinder:
    """
    Bind text runs to cells.

    Containment is inclusive on all four sides. A run is not removed once
    bound, so overlapping cells may share it.
    """

    def __init__(self, config: Optional[BinderConfig] = None):
        self.config = config or BinderConfig()
        self.unbound = 0

    def bind(self, rects: Iterable[Rect], runs: Iterable[Any]) -> List[TextRect]:
        """
        Args:
            rects: Cells in enumeration order
            runs: TextRun values (or anything TextRun.coerce accepts)

        Returns:
            One TextRect per cell, in the order of ``rects``
        """
        runs = [TextRun.coerce(r) for r in runs]
        anchors = [r.anchor for r in runs]
        bound = [False] * len(runs)

        result: List[TextRect] = []
        for rect in rects:
            strings = []
            for i, run in enumerate(runs):
                if rect.contains(anchors[i]):
                    strings.append(run.text)
                    bound[i] = True
            if not strings and self.config.drop_empty:
                continue
            result.append(TextRect(rect=rect, strings=strings))

        self.unbound = bound.count(False)
        return result


def bind_text(
    rects: Iterable[Rect],
    runs: Iterable[Any],
    config: Optional[BinderConfig] = None
) -> List[TextRect]:
    """
    Convenience function for text binding.
    """
    return TextBinder(config).bind(rects, runs)
