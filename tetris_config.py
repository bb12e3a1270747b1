
"""Tunable gameplay and display numbers"""
import logging
from typing import Any, Dict

CONFIG: Dict[str, Any] = {
    "CANVAS_WIDTH": 300,
    "CANVAS_HEIGHT": 600,
    "BLOCK_SIZE": 30,
    "DROP_INTERVAL_MS": 1000,
    "TARGET_FPS": 60,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}

_POSITIVE = ("CANVAS_WIDTH", "CANVAS_HEIGHT", "BLOCK_SIZE", "DROP_INTERVAL_MS", "TARGET_FPS")


class ConfigError(ValueError):
    pass


def make_config(**overrides) -> Dict[str, Any]:
    """Return a copy of CONFIG with overrides applied and checked."""
    unknown = set(overrides) - set(CONFIG)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")
    cfg = dict(CONFIG)
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    for key in _POSITIVE:
        v = cfg[key]
        if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
            raise ConfigError(f"{key} must be a positive integer, got {v!r}")
    if cfg["BLOCK_SIZE"] > min(cfg["CANVAS_WIDTH"], cfg["CANVAS_HEIGHT"]):
        raise ConfigError("BLOCK_SIZE is larger than the canvas")
    level = str(cfg["LOG_LEVEL"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown LOG_LEVEL {cfg['LOG_LEVEL']!r}")
    cfg["LOG_LEVEL"] = level
    return cfg
