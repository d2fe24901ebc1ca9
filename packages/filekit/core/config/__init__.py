"""FileKit configuration."""

from filekit.core.config.loader import detect_format, load_config, load_filekit_config
from filekit.core.config.models import FileKitConfig, LoggingConfig

__all__ = [
    "FileKitConfig",
    "LoggingConfig",
    "detect_format",
    "load_config",
    "load_filekit_config",
]
