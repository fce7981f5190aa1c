"""Runtime settings: optional YAML file, overridden by environment variables."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger("prompt_relay.config")

DEFAULT_CONFIG_PATH = "configs/relay.yaml"
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"

_ENV_KEYS = {
    "api_key": "GEMINI_API_KEY",
    "model_name": "GEMINI_MODEL",
    "base_url": "GEMINI_BASE_URL",
    "timeout_s": "GEMINI_TIMEOUT_S",
}


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model_name: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 60.0


def load_cfg(path: str) -> dict[str, Any]:
    """Read a YAML mapping; a missing file yields an empty mapping."""
    p = Path(path)
    if not p.exists():
        return {}
    with open(p, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config at {path} must be a mapping, got {type(data).__name__}")
    return data


def load_settings(path: str | None = None) -> Settings:
    """
    Build settings for the relay.

    Args:
        path: YAML config path. Defaults to ``PROMPT_RELAY_CONFIG`` or ``configs/relay.yaml``.
    """
    cfg_path = path or os.getenv("PROMPT_RELAY_CONFIG", DEFAULT_CONFIG_PATH)
    cfg = load_cfg(cfg_path)
    for field, env_name in _ENV_KEYS.items():
        value = os.getenv(env_name)
        if value:
            cfg[field] = value

    settings = Settings(
        api_key=str(cfg.get("api_key", "") or ""),
        model_name=str(cfg.get("model_name", DEFAULT_MODEL)),
        base_url=str(cfg.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
        timeout_s=float(cfg.get("timeout_s", 60.0)),
    )
    if not settings.api_key:
        LOGGER.warning("No Gemini API key configured; set %s", _ENV_KEYS["api_key"])
    return settings
