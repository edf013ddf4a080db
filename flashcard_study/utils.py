from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any


def load_json(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def make_rng(seed: int | None) -> random.Random | None:
    """Seeded generator for reproducible shuffles; None keeps the module-level one."""
    if seed is None:
        return None
    return random.Random(seed)
