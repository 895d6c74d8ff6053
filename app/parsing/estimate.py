from __future__ import annotations

import random

from app.core.catalog import catalog_range

from .matchers import first_match, regex_int

DEFAULT_ESTIMATE_BOUNDS = (90, 150)

_ESTIMATE_MATCHERS = (
    regex_int(r"estimated\s+iq[^\d\n]{0,40}?(\d{1,3})\b"),
    regex_int(r"\biq\b[^\d\n]{0,40}?(\d{1,3})\b"),
    regex_int(r"\biq\s+score\s+of\s+(\d{1,3})\b"),
    regex_int(r"\bscore\s+of\s+(\d{1,3})\b"),
)


def estimate_bounds() -> tuple[int, int]:
    return catalog_range("estimate.bounds", DEFAULT_ESTIMATE_BOUNDS)


def extract_estimate(
    text: str,
    rng: random.Random,
    *,
    bounds: tuple[int, int] | None = None,
) -> int:
    """Return the first estimate found in text, or a random value inside bounds."""
    low, high = bounds or estimate_bounds()
    value = first_match(_ESTIMATE_MATCHERS, text or "")
    if value is not None and low <= value <= high:
        return value
    return rng.randint(low, high)
