"""Configuration settings for Vepor."""

from pathlib import Path

from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    """Configuration for shape inspection reports.

    Kernel tolerances are fixed and deliberately not part of the settings;
    these options only affect how results are presented.
    """

    precision: int = Field(
        default=4,
        ge=0,
        le=12,
        description="Decimal places for printed coordinates and areas",
    )
    show_segments: bool = Field(
        default=True,
        description="Print the resolved segment table",
    )
    show_intersections: bool = Field(
        default=True,
        description="Print operand intersection points for boolean shapes",
    )
    show_control_points: bool = Field(
        default=False,
        description="Print the control points of the resolved shape",
    )

    def format_number(self, value: float) -> str:
        """Format a number with the configured precision."""
        return f"{value:.{self.precision}f}"


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


class VeporSettings(BaseModel):
    """Main application settings."""

    report: ReportConfig = Field(default_factory=ReportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VeporSettings:
    """Get default application settings."""
    return VeporSettings()
