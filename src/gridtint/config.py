"""Configuration model for GridTint."""

import re
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.constants import COLORS
from .core.exceptions import ConfigurationError, ProcessingError


class Config(BaseModel):
    """Configuration for GridTint."""

    # Matching
    case_insensitive_hex: bool = Field(
        False, description="Compare hex colors ignoring case (exact match when False)"
    )
    default_font_color: str = Field(
        COLORS.DEFAULT_FONT_COLOR,
        description="Font color reported for cells without an explicit color by hosts "
        "built through ColorFilter.from_workbook or ColorFilter.from_sheet",
    )

    # Error reporting
    error_message: str = Field(
        ProcessingError.DEFAULT_MESSAGE,
        min_length=1,
        description="Fixed message carried by ProcessingError",
    )

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")
    enable_debug: bool = Field(False, description="Enable debug mode")

    @field_validator("default_font_color")
    @classmethod
    def _check_default_font_color(cls, value: str) -> str:
        if not re.fullmatch(COLORS.HEX_COLOR_PATTERN, value):
            raise ValueError(f"default_font_color must be #RRGGBB, got {value!r}")
        return value.lower()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from environment variables.
        """
        import os

        from dotenv import load_dotenv

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        log_file = os.getenv("GRIDTINT_LOG_FILE")

        try:
            return cls(
                case_insensitive_hex=os.getenv("GRIDTINT_CASE_INSENSITIVE_HEX", "false").lower()
                == "true",
                default_font_color=os.getenv(
                    "GRIDTINT_DEFAULT_FONT_COLOR", COLORS.DEFAULT_FONT_COLOR
                ),
                error_message=os.getenv(
                    "GRIDTINT_ERROR_MESSAGE", ProcessingError.DEFAULT_MESSAGE
                ),
                log_level=os.getenv("GRIDTINT_LOG_LEVEL", "INFO"),
                log_file=Path(log_file) if log_file else None,
                enable_debug=os.getenv("GRIDTINT_ENABLE_DEBUG", "false").lower() == "true",
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid GRIDTINT_* environment: {e}") from e

    def with_overrides(self, **overrides) -> "Config":
        """Return a validated copy with overrides applied.

        Keys that are not Config fields are ignored. The original is left
        unchanged.

        Raises:
            ConfigurationError: If an override fails validation
        """
        known = {key: value for key, value in overrides.items() if key in type(self).model_fields}
        if not known:
            return self
        try:
            return type(self).model_validate({**self.model_dump(), **known})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config override: {e}") from e
