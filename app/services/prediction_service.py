from __future__ import annotations

import asyncio
import logging
import os
import random
import time

from app.ai.config import load_ai_config
from app.ai.factory import get_ai_client
from app.core.config import settings
from app.parsing import build_fallback_result, extract
from app.schemas.prediction import PredictionResult, ProfileInput
from app.services.prompt import build_prediction_messages

logger = logging.getLogger(__name__)

_PROVIDER_KEY_ENV = {
    "gemini": ("GOOGLE_AI_API_KEY", "GEMINI_API_KEY"),
    "openai": ("OPENAI_API_KEY",),
}


class PredictionUpstreamError(RuntimeError):
    def __init__(self, message: str, *, code: str = "llm_unavailable"):
        super().__init__(message)
        self.code = code


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def prediction_llm_enabled() -> bool:
    if not _env_bool("PREDICTION_LLM_ENABLED", True):
        return False
    provider = load_ai_config().provider
    for name in _PROVIDER_KEY_ENV.get(provider, ()):
        api_key = (os.getenv(name) or "").strip()
        if api_key and not _looks_like_placeholder(api_key):
            return True
    return False


async def generate_prediction_text(profile: ProfileInput, target_count: int) -> str:
    """Single model call raced against the configured timeout; no retries."""
    if not prediction_llm_enabled():
        raise PredictionUpstreamError("Prediction model is not configured.", code="llm_disabled")

    messages = build_prediction_messages(profile, target_count)
    client = get_ai_client()
    try:
        text = await asyncio.wait_for(client.complete(messages), timeout=settings.ai_timeout_s)
    except asyncio.TimeoutError as exc:
        raise PredictionUpstreamError(
            f"Model call exceeded {settings.ai_timeout_s:.0f}s.", code="llm_timeout"
        ) from exc
    if not text or not text.strip():
        raise PredictionUpstreamError("Model returned an empty response.", code="empty_response")
    return text


async def predict_professions(
    profile: ProfileInput,
    *,
    target_count: int | None = None,
    rng: random.Random | None = None,
) -> PredictionResult:
    count = target_count or settings.prediction_target_count
    started = time.perf_counter()
    try:
        text = await generate_prediction_text(profile, count)
    except PredictionUpstreamError as exc:
        logger.warning("prediction_llm_unavailable code=%s: %s", exc.code, exc)
        return build_fallback_result(count, profile, rng)
    except Exception as exc:  # noqa: BLE001 - static fallback is expected on any upstream failure
        logger.warning(
            "prediction_llm_failed provider=%s latency_ms=%s: %s",
            load_ai_config().provider,
            int((time.perf_counter() - started) * 1000),
            exc,
        )
        return build_fallback_result(count, profile, rng)

    logger.info(
        "prediction_llm_success provider=%s latency_ms=%s text_len=%s",
        load_ai_config().provider,
        int((time.perf_counter() - started) * 1000),
        len(text),
    )
    return extract(text, profile, count, rng=rng)
