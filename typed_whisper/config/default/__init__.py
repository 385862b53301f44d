from typed_whisper.config.default.log import (
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    LOGGING_SECTION_MAP,
)
from typed_whisper.config.default.model import (
    DEFAULT_DEVICE,
    DEFAULT_DOWNLOAD_ROOT,
    DEFAULT_IN_MEMORY,
    DEFAULT_LANGUAGE,
    DEFAULT_MODEL_SIZE,
    MODEL_SECTION_MAP,
    default_decode_options,
)

__all__ = [
    "DEFAULT_DEVICE",
    "DEFAULT_DOWNLOAD_ROOT",
    "DEFAULT_IN_MEMORY",
    "DEFAULT_LANGUAGE",
    "DEFAULT_LOG_FILE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MODEL_SIZE",
    "LOGGING_SECTION_MAP",
    "MODEL_SECTION_MAP",
    "default_decode_options",
]
