"""Pipeline orchestration for SVG combination.

This module runs the whole workflow in one synchronous pass:
read scene -> extract paths -> flatten -> combine -> emit -> write.

Key components:
- SvgCombiner: Main orchestrator class
"""

import time
from pathlib import Path

from svgcombiner.config import CombinerSettings
from svgcombiner.core.clipping import ClippingEngine, PyclipperEngine
from svgcombiner.core.combiner import CombineParams, GroupCombiner
from svgcombiner.core.emitter import build_document
from svgcombiner.core.extractor import extract_paths
from svgcombiner.core.flattener import ContourFlattener
from svgcombiner.core.tessellation import Tessellator
from svgcombiner.domain import OutputDocument, Scene, count_vertices
from svgcombiner.exceptions import SvgCombinerError
from svgcombiner.io import SvgReader, SvgWriter
from svgcombiner.utils import CombineStats, ProcessingLogger, configure_logging


class SvgCombiner:
    """Orchestrates the combination of an SVG document's shapes.

    Manages the complete workflow:
    1. Load the SVG document into a scene
    2. Extract path shapes in document order
    3. Flatten each shape into a polygon group
    4. Fold the groups into one polygon set and clean it up
    5. Emit and save the single-path document

    Example:
        settings = CombinerSettings()
        combiner = SvgCombiner(settings)
        stats = combiner.process(
            input_path=Path("init.svg"),
            output_path=Path("output.svg"),
        )
    """

    def __init__(
        self,
        config: CombinerSettings,
        tessellator: Tessellator | None = None,
        engine: ClippingEngine | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the combiner with configuration.

        Args:
            config: Combiner settings
            tessellator: Curve tessellator (BezierTessellator if None)
            engine: Clipping engine (PyclipperEngine from config if None)
            quiet: Suppress console log output except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.tessellator = tessellator
        if engine is None:
            engine = PyclipperEngine(
                scale=config.combine.scale,
                miter_limit=config.combine.miter_limit,
                arc_tolerance=config.combine.arc_tolerance,
            )
        self.engine = engine

    def _combine(
        self, scene: Scene, processing_logger: ProcessingLogger
    ) -> OutputDocument:
        shapes = extract_paths(scene.root)
        processing_logger.log_shapes_extracted(len(shapes))

        flattener = ContourFlattener(
            tolerance=self.config.flatten.tolerance,
            tessellator=self.tessellator,
            processing_logger=processing_logger,
        )
        groups = flattener.flatten_all(shapes)

        combiner = GroupCombiner(
            engine=self.engine,
            params=CombineParams.from_config(self.config.combine),
            processing_logger=processing_logger,
        )
        combined = combiner.combine(groups)
        processing_logger.log_result(len(combined), count_vertices(combined))

        return build_document(
            combined,
            scene.canvas,
            unit=self.config.output.unit,
            precision=self.config.output.precision,
        )

    def combine_scene(self, scene: Scene) -> tuple[OutputDocument, CombineStats]:
        """Combine an in-memory scene without touching the filesystem.

        Args:
            scene: Parsed scene

        Returns:
            Tuple of (output document, statistics)
        """
        processing_logger = ProcessingLogger(self.logger)
        processing_logger.stats.start_time = time.time()
        document = self._combine(scene, processing_logger)
        processing_logger.stats.end_time = time.time()
        return document, processing_logger.stats

    def load_scene(self, input_path: Path) -> Scene:
        """Read and parse a document.

        Args:
            input_path: Source SVG file

        Returns:
            Parsed scene

        Raises:
            DocumentReadError: If the source cannot be read
            ParseError: If the source is not a valid SVG
        """
        processing_logger = ProcessingLogger(self.logger)
        try:
            scene = SvgReader(input_path).load()
        except SvgCombinerError as e:
            processing_logger.log_error(e)
            raise

        processing_logger.log_scene_loaded(
            str(input_path), scene.canvas.width, scene.canvas.height
        )
        return scene

    def process_scene(self, scene: Scene, output_path: Path) -> CombineStats:
        """Combine an already loaded scene and write the result.

        Args:
            scene: Parsed scene
            output_path: Destination SVG file

        Returns:
            Statistics of the run

        Raises:
            ClipError: If a clipping operation fails
            OutputWriteError: If the destination cannot be written
        """
        processing_logger = ProcessingLogger(self.logger)
        processing_logger.stats.start_time = time.time()

        try:
            document = self._combine(scene, processing_logger)
            size = SvgWriter(output_path).write(document)
            processing_logger.log_output_written(str(output_path), size)
        except SvgCombinerError as e:
            processing_logger.log_error(e)
            raise

        processing_logger.stats.end_time = time.time()
        return processing_logger.stats

    def process(self, input_path: Path, output_path: Path) -> CombineStats:
        """Read, combine and write a document.

        Args:
            input_path: Source SVG file
            output_path: Destination SVG file

        Returns:
            Statistics of the run

        Raises:
            DocumentReadError: If the source cannot be read
            ParseError: If the source is not a valid SVG
            ClipError: If a clipping operation fails
            OutputWriteError: If the destination cannot be written
        """
        start_time = time.time()
        stats = self.process_scene(self.load_scene(input_path), output_path)
        stats.start_time = start_time
        return stats
