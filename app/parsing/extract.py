from __future__ import annotations

import logging
import random
from typing import Any, Mapping

from app.core.config import settings
from app.schemas.prediction import PredictionResult, ProfileInput

from .details import extract_details
from .estimate import extract_estimate
from .labels import extract_labels
from .reconcile import reconcile
from .text import label_key

logger = logging.getLogger(__name__)

PLACEHOLDER_LABEL = "Career Path {index}"


def coerce_profile(profile: ProfileInput | Mapping[str, Any] | None) -> ProfileInput:
    if profile is None:
        return ProfileInput()
    if isinstance(profile, ProfileInput):
        return profile
    return ProfileInput.model_validate(dict(profile))


def resolve_target_count(target_count: int | None) -> int:
    count = settings.prediction_target_count if target_count is None else int(target_count)
    if count < 1:
        raise ValueError("target_count must be a positive integer")
    return count


def fill_to_count(labels: list[str], target_count: int) -> list[str]:
    """Truncate to target_count, appending numbered placeholders if the pool ran dry."""
    filled = list(labels[:target_count])
    seen = {label_key(label) for label in filled}
    index = 1
    while len(filled) < target_count:
        candidate = PLACEHOLDER_LABEL.format(index=index)
        index += 1
        if label_key(candidate) in seen:
            continue
        seen.add(label_key(candidate))
        filled.append(candidate)
    return filled


def extract(
    raw_text: str | None,
    profile: ProfileInput | Mapping[str, Any] | None = None,
    target_count: int | None = None,
    *,
    rng: random.Random | None = None,
) -> PredictionResult:
    """Turn free-form model text into an estimate, career labels and matching detail records."""
    text = raw_text or ""
    profile_input = coerce_profile(profile)
    count = resolve_target_count(target_count)
    rng = rng or random.Random()

    estimate = extract_estimate(text, rng)
    labels = fill_to_count(extract_labels(text, profile_input, count, rng), count)
    extracted = extract_details(text)
    details = reconcile(labels, extracted, profile_input, rng)

    logger.info(
        "prediction_extracted text_len=%s labels=%s extracted_details=%s synthetic=%s",
        len(text),
        len(labels),
        len(extracted),
        sum(1 for record in details if record.synthetic),
    )
    return PredictionResult(estimate=estimate, labels=labels, details=details, source="model")
