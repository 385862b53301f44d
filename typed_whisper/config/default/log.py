"""Default values for logging configuration."""

from typing import Optional

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE: Optional[str] = None

LOGGING_SECTION_MAP = {
    "level": "log_level",
    "file": "log_file",
}

__all__ = ["DEFAULT_LOG_LEVEL", "DEFAULT_LOG_FILE", "LOGGING_SECTION_MAP"]
