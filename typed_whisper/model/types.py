"""Model size and compute device selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

ENGLISH_ONLY_SUFFIX = ".en"


class ModelSize(str, Enum):
    """Pretrained whisper checkpoints, valued by the name ``whisper.load_model`` expects."""

    TINY = "tiny"
    TINY_EN = "tiny.en"
    BASE = "base"
    BASE_EN = "base.en"
    SMALL = "small"
    SMALL_EN = "small.en"
    MEDIUM = "medium"
    MEDIUM_EN = "medium.en"
    LARGE = "large"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "ModelSize":
        return cls.SMALL

    @classmethod
    def parse(cls, name: str) -> "ModelSize":
        """Resolve a checkpoint name such as ``"base.en"``."""
        try:
            return cls(name)
        except ValueError as exc:
            raise ValueError(f"Unknown model size: {name!r}") from exc

    @property
    def english_only(self) -> bool:
        return self.value.endswith(ENGLISH_ONLY_SUFFIX)

    @property
    def base_size(self) -> "ModelSize":
        """Multilingual size an English-only variant is derived from."""
        if not self.english_only:
            return self
        return ModelSize(self.value[: -len(ENGLISH_ONLY_SUFFIX)])


class DeviceKind(str, Enum):
    CPU = "cpu"
    CUDA = "cuda"


@dataclass(frozen=True)
class Device:
    """Compute backend, optionally pinned to an accelerator index."""

    kind: DeviceKind
    index: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", DeviceKind(self.kind))
        if self.index is None:
            return
        if self.kind is DeviceKind.CPU:
            raise ValueError("cpu device does not take an index")
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise ValueError("device index must be an integer")
        if self.index < 0:
            raise ValueError("device index must be non-negative")

    @classmethod
    def cpu(cls) -> "Device":
        return cls(DeviceKind.CPU)

    @classmethod
    def cuda(cls, index: Optional[int] = None) -> "Device":
        return cls(DeviceKind.CUDA, index)

    @classmethod
    def parse(cls, spec: str) -> "Device":
        """Parse ``"cpu"``, ``"cuda"`` or ``"cuda:<index>"``."""
        name, sep, raw_index = spec.strip().lower().partition(":")
        try:
            kind = DeviceKind(name)
        except ValueError as exc:
            raise ValueError(f"Unknown device: {spec!r}") from exc
        if not sep:
            return cls(kind)
        try:
            index = int(raw_index)
        except ValueError as exc:
            raise ValueError(f"Invalid device index in {spec!r}") from exc
        return cls(kind, index)

    def __str__(self) -> str:
        if self.index is None:
            return self.kind.value
        return f"{self.kind.value}:{self.index}"


__all__ = ["Device", "DeviceKind", "ModelSize", "ENGLISH_ONLY_SUFFIX"]
