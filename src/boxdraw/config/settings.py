"""Configuration settings for boxdraw."""

from pathlib import Path

from pydantic import BaseModel, Field

from boxdraw.domain import Metrics, Precision


class MetricsConfig(BaseModel):
    """User overrides for the font metrics.

    Unset fields fall back to the Metrics defaults; radius, butt and
    fat_stroke are derived from width and stroke when left unset.
    """

    width: float | None = Field(
        default=None,
        gt=0,
        le=10000,
        description="Glyph width in font units",
    )
    height: float | None = Field(
        default=None,
        gt=0,
        le=10000,
        description="Height of line elements, including overlap",
    )
    median: float | None = Field(
        default=None,
        ge=-10000,
        le=10000,
        description="Median line",
    )
    stroke: float | None = Field(
        default=None,
        gt=0,
        le=1000,
        description="General stroke weight",
    )
    fat: float | None = Field(
        default=None,
        ge=1.0,
        le=10.0,
        description="Multiplication factor for fat strokes",
    )
    block_height: float | None = Field(
        default=None,
        gt=0,
        le=10000,
        description="Height of block elements",
    )
    em_height: float | None = Field(
        default=None,
        gt=0,
        le=10000,
        description="Height of elements that don't connect vertically",
    )
    radius: float | None = Field(
        default=None,
        ge=0,
        le=5000,
        description="Arc radius (default: width / 2)",
    )
    butt: float | None = Field(
        default=None,
        ge=-1000,
        le=1000,
        description="Horizontal overlap (default: stroke)",
    )
    fat_stroke: float | None = Field(
        default=None,
        gt=0,
        le=10000,
        description="Fat stroke thickness (default: stroke * fat)",
    )
    precision: Precision = Field(
        default=Precision.DOUBLE,
        description="Floating-point precision of metric values",
    )

    def to_metrics(self) -> Metrics:
        """Build Metrics from the set overrides."""
        return Metrics(**self.model_dump(exclude_none=True))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BoxDrawSettings(BaseModel):
    """Main application settings."""

    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BoxDrawSettings:
    """Get default application settings."""
    return BoxDrawSettings()
