"""Default values for model-related configuration."""

from typing import Any, Dict, Optional

DEFAULT_MODEL_SIZE = "small"
DEFAULT_DEVICE: Optional[str] = None
DEFAULT_DOWNLOAD_ROOT: Optional[str] = None
DEFAULT_IN_MEMORY = False
DEFAULT_LANGUAGE: Optional[str] = None


def default_decode_options() -> Dict[str, Any]:
    """Return the default decode option map (whisper's own defaults apply)."""
    return {}


MODEL_SECTION_MAP = {
    "size": "size",
    "name": "size",
    "device": "device",
    "download_root": "download_root",
    "in_memory": "in_memory",
    "language": "language",
}


__all__ = [
    "DEFAULT_MODEL_SIZE",
    "DEFAULT_DEVICE",
    "DEFAULT_DOWNLOAD_ROOT",
    "DEFAULT_IN_MEMORY",
    "DEFAULT_LANGUAGE",
    "MODEL_SECTION_MAP",
    "default_decode_options",
]
