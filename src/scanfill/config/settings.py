"""Configuration settings for scanfill."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from scanfill.domain import FillRule


class RasterConfig(BaseModel):
    """Configuration for the scan-line rasterizer."""

    fill_rule: FillRule = Field(
        default=FillRule.NON_ZERO,
        description="Fill rule used when a call does not name one",
    )


class RenderConfig(BaseModel):
    """Configuration for scene rendering and console previews."""

    preview_max_width: int = Field(
        default=80,
        ge=8,
        le=400,
        description="Widest canvas printed as an ASCII preview",
    )
    filled_char: str = Field(
        default="#",
        min_length=1,
        max_length=1,
        description="Preview character for interior pixels",
    )
    empty_char: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Preview character for exterior pixels",
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

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{value}'")
        return level


class ScanfillSettings(BaseModel):
    """Main application settings."""

    raster: RasterConfig = Field(default_factory=RasterConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ScanfillSettings:
    """Get default application settings."""
    return ScanfillSettings()
