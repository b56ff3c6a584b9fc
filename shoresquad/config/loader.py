"""YAML config loader with dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from shoresquad.config.schema import WidgetConfig


def load_config(path: str | Path | None = None) -> WidgetConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults.
    """
    if path is None:
        return WidgetConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return WidgetConfig(**raw)


def get_config_value(config: WidgetConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'refresh.ack_seconds'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
