from __future__ import annotations

import configparser
from pathlib import Path
from typing import Optional

from attrs import define
import miniaudio


CURRENT_DIR = Path(__file__).parent
CONFIG = CURRENT_DIR / "fouriersynth.ini"
MAX_LABEL_LENGTH = 20
DEFAULT_COS_NAME = "Cosinus:"
DEFAULT_SIN_NAME = "Sinus:"


class ConfigError(ValueError):
    pass


def truncate_label(name: Optional[str], default: str) -> str:
    if not name:
        return default

    return name[:MAX_LABEL_LENGTH]


@define
class Labels:
    cos_name: str = DEFAULT_COS_NAME
    sin_name: str = DEFAULT_SIN_NAME


@define
class AudioOut:
    out_name: str = ""
    backend: str = ""
    buffer_msec: int = 50
    autoplay: bool = False


@define
class Config:
    labels: Labels
    audio_out: AudioOut


def load_config(path: Path | str = CONFIG) -> Config:
    cfg = configparser.ConfigParser()
    # Defaults first so that a partial config file is fine.
    cfg.read(CONFIG)
    if Path(path) != CONFIG and not cfg.read(path):
        raise ConfigError(f"cannot read config file {path}")

    labels = cfg["labels"]
    audio_out = cfg["audio-out"]

    backend = audio_out.get("backend", "").strip()
    if backend and backend.upper() not in miniaudio.Backend.__members__:
        known = ", ".join(b.name.lower() for b in miniaudio.Backend)
        raise ConfigError(f"unknown backend {backend!r}, expected one of: {known}")

    try:
        buffer_msec = audio_out.getint("buffer-msec")
        autoplay = audio_out.getboolean("autoplay")
    except ValueError as ve:
        raise ConfigError(f"[audio-out] {ve}") from None

    if buffer_msec is None or buffer_msec <= 0:
        raise ConfigError(f"[audio-out] buffer-msec must be positive, got {buffer_msec}")

    return Config(
        labels=Labels(
            cos_name=truncate_label(labels.get("cos-name"), DEFAULT_COS_NAME),
            sin_name=truncate_label(labels.get("sin-name"), DEFAULT_SIN_NAME),
        ),
        audio_out=AudioOut(
            out_name=audio_out.get("out-name", "").strip(),
            backend=backend.upper(),
            buffer_msec=buffer_msec,
            autoplay=bool(autoplay),
        ),
    )
