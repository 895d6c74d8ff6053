from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from app.core.config import settings

_CATALOG_CACHE: dict[str, Any] | None = None
_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "config" / "careers.yaml"
_REQUIRED_KEYS = ("padding_pool", "keyword_rules", "age_group_labels", "synthetic", "fallback")


def _catalog_path() -> Path:
    if settings.careers_catalog_path:
        return Path(settings.careers_catalog_path)
    return _DEFAULT_CATALOG_PATH


def get_catalog() -> dict[str, Any]:
    """Load the career catalog (config/careers.yaml) and cache it."""
    global _CATALOG_CACHE

    if _CATALOG_CACHE is not None:
        return _CATALOG_CACHE

    path = _catalog_path()
    if not path.exists():
        raise RuntimeError(
            f"Career catalog not found at '{path}'. "
            "Expected file: config/careers.yaml"
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read career catalog '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in career catalog '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid career catalog '{path}': expected a top-level mapping.")

    missing = [key for key in _REQUIRED_KEYS if key not in parsed]
    if missing:
        raise RuntimeError(f"Invalid career catalog '{path}': missing keys {', '.join(missing)}.")

    _CATALOG_CACHE = parsed
    return _CATALOG_CACHE


def get_catalog_value(path: str, default: Any = None) -> Any:
    """Get nested catalog value using dot path notation, e.g. 'matching.default'."""
    if not path:
        return default

    current: Any = get_catalog()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def catalog_range(path: str, default: tuple[int, int]) -> tuple[int, int]:
    value = get_catalog_value(path)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        low, high = int(value[0]), int(value[1])
        if low <= high:
            return low, high
    return default


def reset_catalog_cache() -> None:
    global _CATALOG_CACHE
    _CATALOG_CACHE = None
