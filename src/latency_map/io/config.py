# src/latency_map/io/config.py
import json
from pathlib import Path

from latency_map.config.models import AppModel


def load_config(path: str | Path) -> AppModel:
    """Read an AppModel from a JSON file. Missing sections take their defaults."""
    with open(Path(path).expanduser(), encoding="utf-8") as fp:
        return AppModel.model_validate(json.load(fp))
