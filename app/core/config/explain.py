from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .settings import settings

_EXPLAIN_CONFIG_CACHE: dict[str, Any] | None = None
_DEFAULT_EXPLAIN_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "explain.yaml"


def _config_path() -> Path:
    if settings.explain_config_path:
        return Path(settings.explain_config_path)
    return _DEFAULT_EXPLAIN_CONFIG_PATH


def get_explain_settings() -> dict[str, Any]:
    """Load engine overrides from config/explain.yaml and cache them."""
    global _EXPLAIN_CONFIG_CACHE

    if _EXPLAIN_CONFIG_CACHE is not None:
        return _EXPLAIN_CONFIG_CACHE

    path = _config_path()
    if not path.exists():
        raise RuntimeError(
            f"Explain config not found at '{path}'. "
            "Expected file: config/explain.yaml"
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Failed to read explain config '{path}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(
            f"Invalid YAML in explain config '{path}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid explain config '{path}': expected a top-level mapping."
        )

    _EXPLAIN_CONFIG_CACHE = parsed
    return _EXPLAIN_CONFIG_CACHE


def get_explain_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'keywords.job_description_limit'."""
    if not path:
        return default

    current: Any = get_explain_settings()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def reset_explain_settings_cache() -> None:
    global _EXPLAIN_CONFIG_CACHE
    _EXPLAIN_CONFIG_CACHE = None
