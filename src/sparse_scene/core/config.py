"""YAML configuration loading into Pydantic models."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_config(config_path: Path, config_class: type[ModelT]) -> ModelT:
    """Load a YAML config file into its Pydantic model. An empty file gives defaults."""
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return config_class(**raw)
