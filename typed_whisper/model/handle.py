"""Handle to a loaded whisper model."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Union

import numpy as np

from typed_whisper.errors import ExternalRuntimeError, InputOutputError
from typed_whisper.language import Language
from typed_whisper.model import runtime
from typed_whisper.model.types import Device, ModelSize
from typed_whisper.transcription import Transcription
from typed_whisper.utils.audio import (
    WHISPER_SAMPLE_RATE,
    duration_seconds,
    ensure_16k,
    pcm16_to_float32,
)

if TYPE_CHECKING:
    from typed_whisper.config.loader import ModelConfig

LOGGER = logging.getLogger("typed_whisper.model")

PathLike = Union[str, os.PathLike]

# Keyword arguments accepted by ``whisper.transcribe`` and its DecodingOptions.
SUPPORTED_DECODE_OPTIONS = {
    "verbose",
    "temperature",
    "compression_ratio_threshold",
    "logprob_threshold",
    "no_speech_threshold",
    "condition_on_previous_text",
    "initial_prompt",
    "word_timestamps",
    "prepend_punctuations",
    "append_punctuations",
    "clip_timestamps",
    "hallucination_silence_threshold",
    "language",
    "task",
    "beam_size",
    "best_of",
    "patience",
    "length_penalty",
    "suppress_tokens",
    "suppress_blank",
    "fp16",
    "prompt",
}


class Model:
    """Owns one loaded whisper model and runs transcriptions against it.

    Build it with :meth:`new`, :meth:`from_size`, :meth:`default` or
    :meth:`from_config`. Every call into whisper holds ``runtime.RUNTIME_LOCK``,
    so concurrent transcriptions from several threads run one at a time.
    """

    def __init__(
        self,
        handle: Any,
        size: ModelSize,
        device: Optional[Device],
        default_language: Optional[Language] = None,
        default_decode_options: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._handle = handle
        self.size = size
        self.device = device
        self.default_language = default_language
        self.default_decode_options = dict(default_decode_options or {})

    @classmethod
    def new(
        cls,
        size: ModelSize,
        device: Optional[Device] = None,
        download_path: Optional[PathLike] = None,
        in_memory: bool = False,
    ) -> "Model":
        """Load ``size`` through ``whisper.load_model``.

        ``download_path`` is the weight cache directory; it must already exist.
        """
        options: Dict[str, Any] = {}
        if device is not None:
            options["device"] = str(device)
        if download_path is not None:
            options["download_root"] = str(_resolve(download_path))
        options["in_memory"] = in_memory

        with runtime.RUNTIME_LOCK:
            whisper = runtime.get_whisper()
            try:
                handle = whisper.load_model(size.value, **options)
            except Exception as exc:
                LOGGER.error("Failed to load model '%s': %s", size.value, exc)
                raise ExternalRuntimeError(exc) from exc
        LOGGER.info(
            "whisper loaded model=%s device=%s download_root=%s in_memory=%s",
            size.value,
            options.get("device", "auto"),
            options.get("download_root"),
            in_memory,
        )
        return cls(handle, size, device)

    @classmethod
    def from_size(cls, size: ModelSize) -> "Model":
        return cls.new(size)

    @classmethod
    def default(cls) -> "Model":
        return cls.new(ModelSize.default())

    @classmethod
    def from_config(cls, config: "ModelConfig") -> "Model":
        """Load the model described by a :class:`~typed_whisper.config.ModelConfig`.

        The configured language and decode options become defaults for every
        transcription made with the returned handle.
        """
        language = config.language_hint()
        model = cls.new(
            config.model_size(),
            device=config.device_spec(),
            download_path=config.download_root,
            in_memory=config.in_memory,
        )
        model.default_language = language
        model.default_decode_options = dict(config.decode_options)
        return model

    @property
    def is_loaded(self) -> bool:
        return self._handle is not None

    def close(self) -> None:
        """Drop the reference to the whisper model."""
        if self._handle is not None:
            LOGGER.info("whisper released model=%s", self.size.value)
        self._handle = None

    def __enter__(self) -> "Model":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def transcribe_file(
        self,
        path: PathLike,
        language: Optional[Language] = None,
        decode_options: Optional[Dict[str, Any]] = None,
    ) -> Transcription:
        """Transcribe an audio file; the path must exist."""
        resolved = _resolve(path)
        return self._transcribe(str(resolved), language, decode_options)

    def transcribe_audio(
        self,
        samples: Union[Sequence[float], np.ndarray],
        language: Optional[Language] = None,
        decode_options: Optional[Dict[str, Any]] = None,
    ) -> Transcription:
        """Transcribe mono float32 samples already at whisper's 16 kHz rate."""
        try:
            audio = np.asarray(samples, dtype=np.float32).reshape(-1)
        except (TypeError, ValueError) as exc:
            raise ExternalRuntimeError(exc) from exc
        return self._transcribe(audio, language, decode_options)

    def transcribe_pcm16(
        self,
        pcm_bytes: bytes,
        sample_rate: int = WHISPER_SAMPLE_RATE,
        language: Optional[Language] = None,
        decode_options: Optional[Dict[str, Any]] = None,
    ) -> Transcription:
        """Transcribe mono little-endian PCM16 bytes at any sample rate."""
        try:
            audio = ensure_16k(pcm16_to_float32(pcm_bytes), sample_rate)
        except (TypeError, ValueError) as exc:
            raise ExternalRuntimeError(exc) from exc
        return self.transcribe_audio(audio, language, decode_options)

    def _transcribe(
        self,
        audio: Union[str, np.ndarray],
        language: Optional[Language],
        decode_options: Optional[Dict[str, Any]],
    ) -> Transcription:
        merged = dict(self.default_decode_options)
        if decode_options:
            merged.update(decode_options)
        options = _normalize_options(merged)
        requested = options.pop("language", None)
        if language is None:
            language = self.default_language
        if language is None and requested is not None:
            language = Language.from_string(requested)
        if language is not None:
            options["language"] = language.to_string()

        with runtime.RUNTIME_LOCK:
            if self._handle is None:
                raise ExternalRuntimeError("model is not loaded")
            LOGGER.debug(
                "transcribe model=%s input=%s options=%s",
                self.size.value,
                _describe_input(audio),
                options,
            )
            try:
                raw = self._handle.transcribe(audio, **options)
            except Exception as exc:
                LOGGER.error(
                    "whisper transcribe failed model=%s: %s", self.size.value, exc
                )
                raise ExternalRuntimeError(exc) from exc
            return Transcription.from_raw(raw)

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "closed"
        return f"Model(size={self.size.value!r}, device={self.device!s}, {state})"


def _resolve(path: PathLike) -> Path:
    try:
        return Path(path).expanduser().resolve(strict=True)
    except OSError as exc:
        raise InputOutputError(exc) from exc


def _describe_input(audio: Union[str, np.ndarray]) -> str:
    if isinstance(audio, str):
        return audio
    return f"<{duration_seconds(audio):.2f}s audio>"


def _normalize_options(options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    opts = dict(options) if options else {}
    dropped = {
        key: value
        for key, value in opts.items()
        if key not in SUPPORTED_DECODE_OPTIONS
    }
    for key, value in dropped.items():
        LOGGER.warning("Dropping unsupported whisper option %s=%s", key, value)
        opts.pop(key, None)
    return opts


__all__ = ["Model", "SUPPORTED_DECODE_OPTIONS"]
