"""Centralized error codes and exception types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional


class ErrorCode(str, Enum):
    """Stable error identifiers surfaced to callers and logs."""

    # language (ERR100x)
    INVALID_LANGUAGE_STRING = "ERR1001"

    # filesystem (ERR200x)
    INPUT_OUTPUT = "ERR2001"

    # result conversion (ERR300x)
    MISSING_RESULT = "ERR3001"

    # whisper runtime (ERR400x)
    EXTERNAL_RUNTIME = "ERR4001"


@dataclass(frozen=True)
class ErrorSpec:
    """Maps an error code to its default message."""

    code: ErrorCode
    message: str


ERROR_SPECS: Final[dict[ErrorCode, ErrorSpec]] = {
    ErrorCode.INVALID_LANGUAGE_STRING: ErrorSpec(
        ErrorCode.INVALID_LANGUAGE_STRING,
        "string could not be matched to language",
    ),
    ErrorCode.INPUT_OUTPUT: ErrorSpec(
        ErrorCode.INPUT_OUTPUT,
        "IO error",
    ),
    ErrorCode.MISSING_RESULT: ErrorSpec(
        ErrorCode.MISSING_RESULT,
        "result missing in Whisper output",
    ),
    ErrorCode.EXTERNAL_RUNTIME: ErrorSpec(
        ErrorCode.EXTERNAL_RUNTIME,
        "Whisper runtime error",
    ),
}


def spec_for(code: ErrorCode) -> ErrorSpec:
    """Return the ErrorSpec for a given error code."""
    return ERROR_SPECS[code]


def format_error(code: ErrorCode, detail: Optional[str] = None) -> str:
    """Format an error code and optional detail into a message."""
    spec = ERROR_SPECS[code]
    message = f"{spec.message}: {detail}" if detail else spec.message
    return f"{spec.code.value} {message}"


class WhisperBindingError(RuntimeError):
    """Base class for every error raised by typed_whisper."""

    code: ErrorCode = ErrorCode.EXTERNAL_RUNTIME

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail or ERROR_SPECS[self.code].message
        super().__init__(format_error(self.code, detail))


class InvalidLanguageString(WhisperBindingError):
    """A string did not match any supported language."""

    code = ErrorCode.INVALID_LANGUAGE_STRING

    def __init__(self, value: object) -> None:
        self.input = value
        super().__init__(repr(value))


class InputOutputError(WhisperBindingError):
    """A filesystem path could not be resolved or accessed."""

    code = ErrorCode.INPUT_OUTPUT

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(str(cause))


class MissingResultError(WhisperBindingError):
    """The whisper response lacked a required field."""

    code = ErrorCode.MISSING_RESULT

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)


class ExternalRuntimeError(WhisperBindingError):
    """Any other failure raised by, or while talking to, the whisper runtime."""

    code = ErrorCode.EXTERNAL_RUNTIME

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(str(cause))


__all__ = [
    "ErrorCode",
    "ErrorSpec",
    "ERROR_SPECS",
    "ExternalRuntimeError",
    "InputOutputError",
    "InvalidLanguageString",
    "MissingResultError",
    "WhisperBindingError",
    "format_error",
    "spec_for",
]
