from __future__ import annotations

import random
from typing import Any, Mapping

from app.core.catalog import get_catalog_value
from app.schemas.prediction import DetailRecord, PredictionResult, ProfileInput

from .extract import coerce_profile, fill_to_count, resolve_target_count
from .labels import pad_labels
from .reconcile import reconcile

DEFAULT_FALLBACK_ESTIMATE = 115


def static_fallback_details() -> list[DetailRecord]:
    entries = get_catalog_value("fallback.details", []) or []
    return [
        DetailRecord(
            title=str(entry["title"]),
            match=int(entry["match"]),
            description=str(entry.get("description", "")).strip(),
            synthetic=True,
        )
        for entry in entries
    ]


def build_fallback_result(
    target_count: int | None = None,
    profile: ProfileInput | Mapping[str, Any] | None = None,
    rng: random.Random | None = None,
) -> PredictionResult:
    """Precomputed result used when the model call fails; topped up only past the catalog size."""
    count = resolve_target_count(target_count)
    rng = rng or random.Random()
    static_details = static_fallback_details()
    labels = [record.title for record in static_details][:count]
    if len(labels) < count:
        labels = fill_to_count(pad_labels(labels, count, rng), count)
    details = reconcile(labels, static_details, coerce_profile(profile), rng)
    estimate = int(get_catalog_value("fallback.estimate", DEFAULT_FALLBACK_ESTIMATE))
    return PredictionResult(estimate=estimate, labels=labels, details=details, source="fallback")
