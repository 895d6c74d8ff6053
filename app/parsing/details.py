from __future__ import annotations

import logging

from app.core.catalog import catalog_range, get_catalog_value
from app.schemas.prediction import MATCH_MAX, MATCH_MIN, DetailRecord

from .matchers import first_match, regex_span_int
from .segments import record_segments, segment_title
from .text import clean_description

logger = logging.getLogger(__name__)

DEFAULT_MATCH = 85
DEFAULT_TITLE = "Career Option"

_MATCH_MATCHERS = (
    regex_span_int(r"match(?:\s+percentage)?\s*[:=\-–]?\s*\(?\s*(\d{1,3})\s*%", low=0, high=100),
    regex_span_int(r"\(\s*(\d{1,3})\s*%[^)\n]*\)?", low=0, high=100),
    regex_span_int(r"(\d{1,3})\s*%\s*match\b", low=0, high=100),
    regex_span_int(r"(\d{1,3})\s*%", low=0, high=100),
)


def match_bounds() -> tuple[int, int]:
    return catalog_range("matching.bounds", (MATCH_MIN, MATCH_MAX))


def clamp_match(value: int) -> int:
    low, high = match_bounds()
    return max(low, min(high, value))


def default_match() -> int:
    return clamp_match(int(get_catalog_value("matching.default", DEFAULT_MATCH)))


def parse_segment(segment: str) -> DetailRecord:
    title = segment_title(segment) or DEFAULT_TITLE
    found = first_match(_MATCH_MATCHERS, segment)
    if found is None:
        match, description = default_match(), segment
    else:
        value, end = found
        match, description = clamp_match(value), segment[end:]
    return DetailRecord(title=title, match=match, description=clean_description(description))


def extract_details(text: str) -> list[DetailRecord]:
    """Structured records for every segment that carries a match percentage.

    Malformed input degrades to an empty list; callers backfill from labels.
    """
    try:
        return [parse_segment(segment) for segment in record_segments(text or "")]
    except Exception as exc:  # noqa: BLE001 - reconciliation backfills on empty
        logger.warning("detail_extraction_failed text_len=%s: %s", len(text or ""), exc)
        return []
