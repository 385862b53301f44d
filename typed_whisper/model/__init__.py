"""Model handle and model selection types."""

from typed_whisper.model.handle import SUPPORTED_DECODE_OPTIONS, Model
from typed_whisper.model.types import Device, DeviceKind, ModelSize

__all__ = ["Device", "DeviceKind", "Model", "ModelSize", "SUPPORTED_DECODE_OPTIONS"]
