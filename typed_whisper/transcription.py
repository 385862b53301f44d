"""Typed transcription results and the conversion from raw whisper output."""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple

from typed_whisper.errors import ExternalRuntimeError, MissingResultError
from typed_whisper.language import Language


@dataclass(frozen=True)
class Segment:
    """A time-stamped span of the transcript, in seconds."""

    text: str
    start: float
    end: float

    @classmethod
    def from_raw(cls, raw: Any) -> "Segment":
        if not isinstance(raw, Mapping):
            raise ExternalRuntimeError(
                f"segment must be a mapping, got {type(raw).__name__}"
            )
        text = _require(raw, "text")
        start = _require(raw, "start")
        end = _require(raw, "end")
        return cls(
            text=_as_str(text, "segment text"),
            start=_as_seconds(start, "start"),
            end=_as_seconds(end, "end"),
        )


@dataclass(frozen=True)
class Transcription:
    """Full transcript, its segments in chronological order, and the language."""

    text: str
    segments: Tuple[Segment, ...]
    language: Language

    @classmethod
    def from_raw(cls, raw: Any) -> "Transcription":
        """Validate a ``whisper.transcribe`` result dict.

        Fields are extracted in order and the first missing one aborts the
        conversion, so a partially populated result is never returned. Segment
        order, text and timings are taken as reported.
        """
        if not isinstance(raw, Mapping):
            raise ExternalRuntimeError(
                f"transcription result must be a mapping, got {type(raw).__name__}"
            )
        text = _require(raw, "text")
        raw_segments = _require(raw, "segments")
        language = _require(raw, "language")

        if isinstance(raw_segments, (str, bytes)) or not isinstance(
            raw_segments, (list, tuple)
        ):
            raise ExternalRuntimeError(
                f"segments must be a list, got {type(raw_segments).__name__}"
            )
        segments = tuple(Segment.from_raw(seg) for seg in raw_segments)
        return cls(
            text=_as_str(text, "text"),
            segments=segments,
            language=Language.from_whisper(_as_str(language, "language")),
        )


def _require(raw: Mapping, field: str) -> Any:
    try:
        return raw[field]
    except KeyError:
        raise MissingResultError(field) from None


def _as_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ExternalRuntimeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _as_seconds(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ExternalRuntimeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


__all__ = ["Segment", "Transcription"]
