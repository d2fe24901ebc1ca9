"""Configuration models for FileKit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    level: str = Field(default="INFO", description="Log level (case-insensitive)")

    structured: bool = Field(default=False, description="Emit JSON log lines instead of text")

    filename: str | None = Field(default=None, description="Log file path (None = stdout)")

    format: str | None = Field(
        default=None, description="Custom text format string (ignored when structured)"
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value!r} (expected one of {_LEVELS})")
        return level


class FileKitConfig(BaseModel):
    """FileKit service configuration.

    Only FileKitAsync needs it: the synchronous service has no settings.
    """

    max_workers: int | None = Field(
        default=None, gt=0, description="I/O thread pool size for async operations (None = default)"
    )

    worker_name: str = Field(
        default="filekit-worker", min_length=1, description="Name of the async worker thread"
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")
