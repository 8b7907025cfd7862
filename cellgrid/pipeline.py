"""
Cell Pipeline
=============
Single entry point for running the complete cell extraction pipeline.
Orchestrates: Paths -> Edges -> Arrangement -> Graph -> Cells -> Binding -> TextRect
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Any, Optional, Iterable

from .types import TextRect, TextRun, THRESHOLD, EPSILON
from .paths import PathInterpreter, PathConfig
from .edges import EdgeNormalizer, NormalizerConfig
from .arrangement import ArrangementBuilder, ArrangementConfig
from .graph import GridGraphBuilder, GraphConfig
from .cells import CellEnumerator, CellConfig
from .binding import TextBinder, BinderConfig


@dataclass
class PipelineConfig:
    """Complete pipeline configuration"""
    # Stage configs
    path_config: PathConfig = field(default_factory=PathConfig)
    normalizer_config: NormalizerConfig = field(default_factory=NormalizerConfig)
    arrangement_config: ArrangementConfig = field(default_factory=ArrangementConfig)
    graph_config: GraphConfig = field(default_factory=GraphConfig)
    cell_config: CellConfig = field(default_factory=CellConfig)
    binder_config: BinderConfig = field(default_factory=BinderConfig)

    # Debug
    debug: bool = False

    @classmethod
    def default(cls) -> 'PipelineConfig':
        """Tolerances tuned for ordinary ruled tables"""
        return cls()

    @classmethod
    def with_threshold(cls, threshold: float, epsilon: float = EPSILON) -> 'PipelineConfig':
        """All stages share one point-equivalence threshold"""
        return cls(
            normalizer_config=NormalizerConfig(threshold=threshold),
            arrangement_config=ArrangementConfig(threshold=threshold, epsilon=epsilon),
            graph_config=GraphConfig(threshold=threshold),
            cell_config=CellConfig(min_area=threshold * threshold),
        )

    @classmethod
    def fine(cls) -> 'PipelineConfig':
        """Dense grids with rulings closer than the default threshold"""
        return cls.with_threshold(THRESHOLD / 4, EPSILON / 4)

    @classmethod
    def text_only(cls) -> 'PipelineConfig':
        """Default tolerances, cells without text omitted"""
        config = cls()
        config.binder_config.drop_empty = True
        return config


@dataclass
class DebugBundle:
    """Debug information from pipeline run"""
    operators_count: int = 0
    skipped_operators: int = 0
    segments_count: int = 0

    vertical_count: int = 0
    horizontal_count: int = 0
    discarded_count: int = 0

    arrangement_count: int = 0
    arrangement_passes: int = 0
    crossings_count: int = 0

    raw_junctions_count: int = 0
    junctions_count: int = 0
    up_links_count: int = 0
    right_links_count: int = 0

    rects_count: int = 0
    open_corners_count: int = 0
    small_rects_count: int = 0

    text_runs_count: int = 0
    unbound_runs_count: int = 0
    text_rects_count: int = 0

    def summary(self) -> str:
        """Generate summary string"""
        lines = [
            "=" * 60,
            "CELL GRID DEBUG SUMMARY",
            "=" * 60,
            f"Operators: {self.operators_count} (skipped {self.skipped_operators})",
            f"Segments: {self.segments_count}",
            f"Vertical / Horizontal / Diagonal: "
            f"{self.vertical_count} / {self.horizontal_count} / {self.discarded_count}",
            "",
            f"Arrangement Edges: {self.arrangement_count}",
            f"Arrangement Passes: {self.arrangement_passes}",
            f"Crossings Resolved: {self.crossings_count}",
            "",
            f"Junctions: {self.junctions_count} (from {self.raw_junctions_count} raw points)",
            f"Links Up / Right: {self.up_links_count} / {self.right_links_count}",
            "",
            f"Cells: {self.rects_count}",
            f"Open Corners: {self.open_corners_count}",
            f"Below Min Area: {self.small_rects_count}",
            "",
            f"Text Runs: {self.text_runs_count} (unbound {self.unbound_runs_count})",
            f"Final TextRects: {self.text_rects_count}",
            "=" * 60,
        ]
        return "\n".join(lines)


class CellPipeline:
    """
    Main cell extraction pipeline.

    Stages hold only their configuration, so separate pipeline instances
    can process separate pages concurrently.

    Usage:
        pipeline = CellPipeline()
        text_rects, debug = pipeline.run(operators, text_runs)
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig.default()

        # Propagate debug flag
        if self.config.debug:
            self.config.path_config.debug = True
            self.config.arrangement_config.debug = True
            self.config.graph_config.debug = True
            self.config.cell_config.debug = True

        # Initialize components
        self.interpreter = PathInterpreter(self.config.path_config)
        self.normalizer = EdgeNormalizer(self.config.normalizer_config)
        self.arrangement = ArrangementBuilder(self.config.arrangement_config)
        self.graph_builder = GridGraphBuilder(self.config.graph_config)
        self.enumerator = CellEnumerator(self.config.cell_config)
        self.binder = TextBinder(self.config.binder_config)

    def run(
        self,
        operators: Iterable[Tuple[str, Any]],
        text_runs: Iterable[Any]
    ) -> Tuple[List[TextRect], DebugBundle]:
        """
        Run pipeline on one page.

        Args:
            operators: ``(opcode, args)`` drawing operators
            text_runs: TextRun values, ``(text, transform)`` pairs or
                pdf.js-style ``{"str", "transform"}`` dicts

        Returns:
            Tuple of (text_rects, debug_bundle)
        """
        debug = DebugBundle()
        operators = list(operators)
        runs = [TextRun.coerce(r) for r in text_runs]
        debug.operators_count = len(operators)
        debug.text_runs_count = len(runs)

        # 1. Interpret paths
        segments = list(self.interpreter.iter_segments(operators))
        debug.segments_count = len(segments)
        debug.skipped_operators = self.interpreter.skipped

        # 2. Classify edges
        normalized = self.normalizer.normalize(segments)
        debug.vertical_count = len(normalized.vertical)
        debug.horizontal_count = len(normalized.horizontal)
        debug.discarded_count = normalized.discarded

        if self.config.debug:
            print(f"[PIPELINE] Segments: {debug.segments_count} "
                  f"({debug.vertical_count} vertical, {debug.horizontal_count} horizontal, "
                  f"{debug.discarded_count} diagonal)")

        # 3. Planar arrangement
        edges = self.arrangement.build(normalized.all_edges)
        debug.arrangement_count = len(edges)
        debug.arrangement_passes = self.arrangement.passes
        debug.crossings_count = self.arrangement.crossings

        # The arrangement keeps each edge's axis; split by it again
        split = self.normalizer.normalize(edges)

        # 4. Junction graph
        graph = self.graph_builder.build(split.vertical, split.horizontal)
        debug.raw_junctions_count = len(graph.raw_points)
        debug.junctions_count = len(graph)
        debug.up_links_count = len(graph.up)
        debug.right_links_count = len(graph.right)

        # 5. Cells
        rects = self.enumerator.enumerate(graph)
        debug.rects_count = len(rects)
        debug.open_corners_count = self.enumerator.open_corners
        debug.small_rects_count = self.enumerator.too_small

        # 6. Text
        text_rects = self.binder.bind(rects, runs)
        debug.unbound_runs_count = self.binder.unbound
        debug.text_rects_count = len(text_rects)

        if self.config.debug:
            print(f"[PIPELINE] Cells: {debug.rects_count}, text runs unbound: {debug.unbound_runs_count}")

        return text_rects, debug


def extract_page_cells(
    pdf_path: str,
    page_number: int = 1,
    config: Optional[PipelineConfig] = None
) -> Tuple[List[TextRect], DebugBundle]:
    """
    Single entry point for running the pipeline on one page of a PDF file.

    Args:
        pdf_path: Path to the PDF
        page_number: 1-indexed page number
        config: Pipeline configuration

    Raises:
        PageSourceError: the file or page can't be read
    """
    from .page_source import load_page_content

    cfg = config or PipelineConfig.default()
    content = load_page_content(pdf_path, page_number)

    if cfg.debug:
        print(f"[PIPELINE] Page {content.page_number}: {len(content.operators)} operators, "
              f"{len(content.text_runs)} text runs")

    pipeline = CellPipeline(cfg)
    return pipeline.run(content.operators, content.text_runs)
