"""Process-wide access to the openai-whisper runtime."""

import logging
import threading
from types import ModuleType
from typing import Optional

from typed_whisper.errors import ExternalRuntimeError

LOGGER = logging.getLogger("typed_whisper.runtime")

# Held for the whole of each call into whisper, across all Model instances.
RUNTIME_LOCK = threading.Lock()

_WHISPER: Optional[ModuleType] = None


def get_whisper() -> ModuleType:
    """Import ``whisper`` on first use and return the cached module.

    Callers must hold ``RUNTIME_LOCK``. The module is never unloaded.
    """
    global _WHISPER
    if _WHISPER is None:
        try:
            import whisper
        except ImportError as exc:
            raise ExternalRuntimeError(
                "typed_whisper requires the openai-whisper package"
            ) from exc
        LOGGER.info("whisper runtime initialized version=%s", _version_of(whisper))
        _WHISPER = whisper
    return _WHISPER


def _version_of(module: ModuleType) -> str:
    return str(getattr(module, "__version__", "unknown"))


__all__ = ["RUNTIME_LOCK", "get_whisper"]
