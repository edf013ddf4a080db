from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .utils import load_json

DEFAULT_CONFIG_PATH = str(Path("config") / "default.json")


@dataclass(frozen=True)
class StudyConfig:
    shuffle: bool = False
    seed: int | None = None
    # None defers to the LOG_LEVEL environment variable.
    log_level: str | None = None


def load_config(config_path: str | Path) -> StudyConfig:
    data = load_json(config_path)
    if not isinstance(data, dict):
        raise ValueError(f"config must be a JSON object: {config_path}")
    seed = data.get("seed")
    log_level = data.get("log_level")
    return StudyConfig(
        shuffle=bool(data.get("shuffle", False)),
        seed=int(seed) if seed is not None else None,
        log_level=str(log_level).upper() if log_level else None,
    )
