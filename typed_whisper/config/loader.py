import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from typed_whisper.config.default import (
    DEFAULT_DEVICE,
    DEFAULT_DOWNLOAD_ROOT,
    DEFAULT_IN_MEMORY,
    DEFAULT_LANGUAGE,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MODEL_SIZE,
    LOGGING_SECTION_MAP,
    MODEL_SECTION_MAP,
    default_decode_options,
)
from typed_whisper.language import Language
from typed_whisper.model.types import Device, ModelSize
from typed_whisper.utils.logger import configure_logging

LOGGER = logging.getLogger("typed_whisper.config")


@dataclass
class ModelConfig:
    size: str = DEFAULT_MODEL_SIZE
    device: Optional[str] = DEFAULT_DEVICE
    download_root: Optional[str] = DEFAULT_DOWNLOAD_ROOT
    in_memory: bool = DEFAULT_IN_MEMORY
    language: Optional[str] = DEFAULT_LANGUAGE
    decode_options: Dict[str, Any] = field(default_factory=default_decode_options)
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = DEFAULT_LOG_FILE

    def model_size(self) -> ModelSize:
        return ModelSize.parse(self.size)

    def device_spec(self) -> Optional[Device]:
        if not self.device:
            return None
        return Device.parse(self.device)

    def language_hint(self) -> Optional[Language]:
        """Return the configured language, or None to let whisper detect it."""
        if not self.language:
            return None
        return Language.from_string(self.language)

    def setup_logging(self) -> None:
        """Install the logging handlers described by the ``logging:`` section."""
        configure_logging(self.log_level, self.log_file)


DEFAULT_CONFIG_PATH = Path("~/.config/typed-whisper/config.yaml")

SECTION_MAP: Dict[str, Dict[str, str]] = {
    "model": MODEL_SECTION_MAP,
    "logging": LOGGING_SECTION_MAP,
}


def load_config(path: Optional[Path] = None) -> ModelConfig:
    """Load model configuration from YAML, falling back to defaults."""
    cfg = ModelConfig()
    config_path = Path(path or DEFAULT_CONFIG_PATH).expanduser()
    data = _read_yaml(config_path)
    if data:
        _apply_sections(cfg, data)
        LOGGER.debug("Loaded configuration from %s", config_path)
    return cfg


def _read_yaml(path: Optional[Path]) -> Optional[Dict[str, Any]]:
    if not path or not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if isinstance(data, dict):
        return data
    return None


def _apply_sections(cfg: ModelConfig, raw: Dict[str, Any]) -> None:
    field_names = {f.name for f in fields(ModelConfig)}
    for section, mapping in SECTION_MAP.items():
        data = raw.get(section)
        if not isinstance(data, dict):
            continue
        for key, attr in mapping.items():
            if key in data and data[key] is not None:
                setattr(cfg, attr, data[key])
        if section == "model":
            _apply_decode_options(cfg, data.get("decode_options"))

    _apply_decode_options(cfg, raw.get("decode_options"))

    for key, value in raw.items():
        if key in SECTION_MAP or key == "decode_options":
            continue
        if key in field_names and value is not None:
            setattr(cfg, key, value)

    cfg.in_memory = bool(cfg.in_memory)
    if cfg.device is not None:
        cfg.device = str(cfg.device)


def _apply_decode_options(cfg: ModelConfig, options: Optional[Any]) -> None:
    if isinstance(options, dict) and options:
        cfg.decode_options = dict(options)


__all__ = [
    "ModelConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
]
