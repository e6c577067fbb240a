"""Configuration settings for SVG Combiner."""

from pathlib import Path

from pydantic import BaseModel, Field


class FlattenConfig(BaseModel):
    """Configuration for curve flattening."""

    tolerance: float = Field(
        default=0.25,
        ge=0.001,
        le=10.0,
        description="Maximum deviation between a curve and its polygon (document units)",
    )


class CombineConfig(BaseModel):
    """Configuration for the offset/boolean combine fold and its cleanup pass.

    All distances and areas are expressed in document units. The offset is
    applied to each shape before it is subtracted from the accumulated
    result; negative values contract the shape, positive values grow it.
    """

    offset: float = Field(
        default=-1.0,
        ge=-100.0,
        le=100.0,
        description="Offset distance applied to each shape before subtraction",
    )
    coarse_simplify: float = Field(
        default=0.25,
        ge=0.0,
        le=10.0,
        description="Tolerance of the first simplification pass",
    )
    fine_simplify: float = Field(
        default=0.05,
        ge=0.0,
        le=10.0,
        description="Tolerance of the final simplification pass",
    )
    min_area: float = Field(
        default=1.0,
        ge=0.0,
        description="Contours with a smaller unsigned area are dropped",
    )
    scale: float = Field(
        default=1000.0,
        ge=1.0,
        le=1_000_000.0,
        description="Integer scale used by the clipping engine",
    )
    miter_limit: float = Field(
        default=2.0,
        ge=1.0,
        le=100.0,
        description="Miter limit for offset joins",
    )
    arc_tolerance: float = Field(
        default=0.25,
        gt=0.0,
        le=10.0,
        description="Maximum deviation of round offset joins (document units)",
    )


class OutputConfig(BaseModel):
    """Output document formatting."""

    unit: str = Field(
        default="mm",
        pattern=r"^(|px|mm|cm|in|pt|pc)$",
        description="Unit suffix for the width/height attributes",
    )
    precision: int = Field(
        default=4,
        ge=0,
        le=10,
        description="Decimal places of emitted coordinates",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CombinerSettings(BaseModel):
    """Main application settings."""

    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    combine: CombineConfig = Field(default_factory=CombineConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CombinerSettings:
    """Get default application settings."""
    return CombinerSettings()
