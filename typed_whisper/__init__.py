"""Typed Python API over the openai-whisper speech-to-text model."""

from typed_whisper.config import ModelConfig, load_config
from typed_whisper.errors import (
    ErrorCode,
    ExternalRuntimeError,
    InputOutputError,
    InvalidLanguageString,
    MissingResultError,
    WhisperBindingError,
)
from typed_whisper.language import Language
from typed_whisper.model import Device, DeviceKind, Model, ModelSize
from typed_whisper.transcription import Segment, Transcription

__version__ = "0.1.0"

__all__ = [
    "Device",
    "DeviceKind",
    "ErrorCode",
    "ExternalRuntimeError",
    "InputOutputError",
    "InvalidLanguageString",
    "Language",
    "MissingResultError",
    "Model",
    "ModelConfig",
    "ModelSize",
    "Segment",
    "Transcription",
    "WhisperBindingError",
    "load_config",
]
