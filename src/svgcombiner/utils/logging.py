"""Logging utilities for SVG Combiner."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class CombineStats:
    """Statistics from a combine run.

    Purely diagnostic; nothing in the pipeline reads these back.
    """

    shape_count: int = 0
    group_count: int = 0
    empty_group_count: int = 0
    input_polygons: int = 0
    input_vertices: int = 0
    output_polygons: int = 0
    output_vertices: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def vertex_reduction(self) -> float | None:
        """Percentage of input vertices removed, or None if nothing was removed."""
        if self.output_vertices < self.input_vertices:
            return 100.0 * (1.0 - self.output_vertices / self.input_vertices)
        return None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svgcombiner")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CombineStats()

    def log_scene_loaded(self, source: str, width: float, height: float) -> None:
        """Log a parsed scene."""
        self._logger.info("Scene loaded", source=source, width=width, height=height)

    def log_shapes_extracted(self, shape_count: int) -> None:
        """Log the number of extracted path shapes."""
        self._logger.info("Shapes extracted", shapes=shape_count)
        self._stats.shape_count = shape_count

    def log_shape_flattened(self, shape_idx: int, contours: int, vertices: int) -> None:
        """Log one flattened path shape."""
        self._logger.debug(
            "Shape flattened",
            shape=shape_idx,
            contours=contours,
            vertices=vertices,
        )
        self._stats.group_count += 1
        self._stats.input_polygons += contours
        self._stats.input_vertices += vertices

    def log_group_skipped(self, shape_idx: int) -> None:
        """Log a shape that produced no closed contour."""
        self._logger.debug("Shape has no closed contours", shape=shape_idx)
        self._stats.empty_group_count += 1

    def log_group_combined(self, group_idx: int, combined_contours: int) -> None:
        """Log the accumulated result after one group."""
        self._logger.debug(
            "Group combined",
            group=group_idx,
            combined=combined_contours,
        )

    def log_cleanup_step(self, step: str, contours: int) -> None:
        """Log one step of the cleanup pass."""
        self._logger.debug("Cleanup step", step=step, contours=contours)

    def log_result(self, polygons: int, vertices: int) -> None:
        """Log the final polygon set."""
        self._stats.output_polygons = polygons
        self._stats.output_vertices = vertices
        self._logger.info(
            "Combine complete",
            input_polygons=self._stats.input_polygons,
            input_vertices=self._stats.input_vertices,
            output_polygons=polygons,
            output_vertices=vertices,
        )

    def log_output_written(self, path: str, size: int) -> None:
        """Log the written output document."""
        self._logger.info("Output written", path=path, bytes=size)

    def log_error(self, error: Exception) -> None:
        """Log a fatal pipeline error."""
        self._logger.error(
            "Combine failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> CombineStats:
        """Get current processing statistics."""
        return self._stats
