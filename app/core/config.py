from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    ai_timeout_s: float
    prediction_target_count: int
    prediction_max_target_count: int
    max_guest_predictions: int
    guest_cookie_name: str
    guest_cookie_max_age_days: int
    guest_db_path: str
    careers_catalog_path: str | None


settings = Settings(
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
    ),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", True),
    ai_timeout_s=_get_env_float("AI_TIMEOUT_S", 30.0),
    prediction_target_count=_get_env_int("PREDICTION_TARGET_COUNT", 5),
    prediction_max_target_count=_get_env_int("PREDICTION_MAX_TARGET_COUNT", 20),
    max_guest_predictions=_get_env_int("MAX_GUEST_PREDICTIONS", 3),
    guest_cookie_name=_get_env("GUEST_COOKIE_NAME", "guestId") or "guestId",
    guest_cookie_max_age_days=_get_env_int("GUEST_COOKIE_MAX_AGE_DAYS", 30),
    guest_db_path=_get_env("GUEST_DB_PATH", "data/guests.db") or "data/guests.db",
    careers_catalog_path=_get_env("CAREERS_CATALOG_PATH"),
)

if settings.prediction_target_count < 1:
    raise RuntimeError("PREDICTION_TARGET_COUNT must be a positive integer.")

if settings.prediction_target_count > settings.prediction_max_target_count:
    raise RuntimeError("PREDICTION_TARGET_COUNT must not exceed PREDICTION_MAX_TARGET_COUNT.")

if settings.ai_timeout_s <= 0:
    raise RuntimeError("AI_TIMEOUT_S must be greater than zero.")
