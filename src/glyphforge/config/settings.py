"""Configuration settings for glyphforge."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Format written by the exporter."""

    OTF = "otf"
    SVG = "svg"


class GeometryConfig(BaseModel):
    """Search parameters of the stroke-width solver.

    Glyph outlines only match the reference shapes at the default step.
    """

    solver_step: float = Field(
        default=0.5,
        gt=0.0,
        le=10.0,
        description="Grid spacing of the handle length search",
    )


class OutputConfig(BaseModel):
    """Configuration for font export."""

    output_dir: Path = Field(
        default=Path("out"),
        description="Directory receiving generated fonts",
    )
    format: OutputFormat = Field(
        default=OutputFormat.OTF,
        description="Export format",
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


class GlyphforgeSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
