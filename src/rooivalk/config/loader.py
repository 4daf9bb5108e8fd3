from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the optional ``config.toml`` overrides.

    Returns an empty dict when the file is missing so callers can fall back to
    environment variables.
    """
    target = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle)


def section(config: dict | None, *keys: str) -> Dict[str, Any]:
    """Return the nested ``[rooivalk.<keys>]`` table or an empty dict."""

    node: Any = (config or {}).get("rooivalk", {})
    for key in keys:
        node = node.get(key, {}) if isinstance(node, dict) else {}
    return node if isinstance(node, dict) else {}


__all__ = ["load_raw_config", "section", "DEFAULT_CONFIG_PATH"]
