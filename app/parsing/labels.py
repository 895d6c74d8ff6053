from __future__ import annotations

import random
import re

from app.core.catalog import get_catalog_value
from app.schemas.prediction import ProfileInput

from .matchers import first_match
from .segments import PERCENT_MARKER_RE, segment_title, title_segments
from .text import clean_label, dedupe_labels, label_key

MAX_LABEL_CHARS = 80
MAX_LABEL_WORDS = 10

_SECTION_HEADERS = (
    "career recommendations",
    "recommended careers",
    "career suggestions",
    "suggested careers",
    "suggested professions",
    "recommended professions",
    "top careers",
    "professions",
)
_SECTION_HEADER_RE = re.compile(
    r"^[ \t>#*-]*(?:" + "|".join(_SECTION_HEADERS) + r")[ \t*]*"
    r"(?::[ \t*]*(?P<inline>[^\n]*)|[ \t]*)$",
    re.IGNORECASE | re.MULTILINE,
)
_HEADING_LINE_RE = re.compile(r"^[ \t#*]*[A-Z][A-Z0-9 &/'-]{2,60}:[ \t*]*$")
_LIST_MARKER_RE = re.compile(r"(?:^|\s)\d+[.)]\s+")
_NUMBERED_ITEM_RE = re.compile(r"^[ \t]*\d+[.)][ \t]+(?P<item>[^\n]{2,%d})[ \t]*$" % MAX_LABEL_CHARS, re.MULTILINE)
_CLAUSE_STOP_RE = re.compile(r":|\s[-–—]\s|" + PERCENT_MARKER_RE.pattern, re.IGNORECASE)

# Subsection names the prompt asks for; numbered scans must not mistake them for careers.
_NON_LABEL_PHRASES = frozenset(
    {
        "title and match percentage",
        "skills alignment",
        "growth potential",
        "work-life balance",
        "work life balance",
        "required skills",
        "salary range",
        "career progression",
        "detailed analysis",
        "career recommendations",
        "estimated iq",
    }
)


def is_valid_label(label: str) -> bool:
    if not label or len(label) < 2 or len(label) > MAX_LABEL_CHARS:
        return False
    if not any(ch.isalpha() for ch in label):
        return False
    if len(label.split()) > MAX_LABEL_WORDS:
        return False
    return label_key(label) not in _NON_LABEL_PHRASES


def _first_clause(item: str) -> str:
    first_line = next((line for line in item.splitlines() if line.strip()), "")
    stop = _CLAUSE_STOP_RE.search(first_line)
    return clean_label(first_line[: stop.start()] if stop else first_line)


def _valid(labels: list[str]) -> list[str] | None:
    kept = [label for label in labels if is_valid_label(label)]
    return kept or None


def labels_from_section(text: str) -> list[str] | None:
    """Numbered list under a CAREER RECOMMENDATIONS style heading."""
    header = _SECTION_HEADER_RE.search(text)
    if not header:
        return None

    body_lines: list[str] = []
    inline = (header.group("inline") or "").strip()
    if inline:
        body_lines.append(inline)
    after_gap = False
    for line in text[header.end():].splitlines():
        stripped = line.strip()
        if not stripped:
            after_gap = bool(body_lines)
            continue
        if _HEADING_LINE_RE.match(stripped) or _SECTION_HEADER_RE.match(stripped):
            break
        # Blank lines may separate numbered items; anything else after a gap ends the list.
        if after_gap and not _NUMBERED_ITEM_RE.match(stripped):
            break
        after_gap = False
        body_lines.append(stripped)

    body = "\n".join(body_lines)
    if _LIST_MARKER_RE.search(body):
        items = _LIST_MARKER_RE.split(body)
    else:
        items = body_lines
    return _valid([_first_clause(item) for item in items if item.strip()])


def labels_from_records(text: str) -> list[str] | None:
    segments = title_segments(text)
    if not segments:
        return None
    return _valid([title for title in (segment_title(segment) for segment in segments) if title])


def labels_from_numbered_lines(text: str) -> list[str] | None:
    return _valid([_first_clause(found.group("item")) for found in _NUMBERED_ITEM_RE.finditer(text)])


_LABEL_EXTRACTORS = (
    labels_from_section,
    labels_from_records,
    labels_from_numbered_lines,
)


def generate_labels(profile: ProfileInput) -> list[str]:
    """Rule-based labels from profile keywords and the age bracket."""
    labels: list[str] = []
    haystack = profile.keyword_text()
    if haystack:
        for rule in get_catalog_value("keyword_rules", []) or []:
            keywords = [str(keyword).lower() for keyword in rule.get("keywords", [])]
            if any(re.search(rf"\b{re.escape(keyword)}\b", haystack) for keyword in keywords):
                labels.extend(str(label) for label in rule.get("labels", []))
    if profile.age_group:
        age_labels = get_catalog_value(f"age_group_labels.{profile.age_group}", []) or []
        labels.extend(str(label) for label in age_labels)
    return labels


def pad_labels(labels: list[str], target_count: int, rng: random.Random) -> list[str]:
    """Top up with unique labels from a freshly shuffled padding pool."""
    padded = list(labels)
    if len(padded) >= target_count:
        return padded
    seen = {label_key(label) for label in padded}
    pool = [str(label) for label in get_catalog_value("padding_pool", []) or []]
    rng.shuffle(pool)
    for candidate in pool:
        if len(padded) >= target_count:
            break
        key = label_key(candidate)
        if key in seen:
            continue
        seen.add(key)
        padded.append(candidate)
    return padded


def extract_labels(
    text: str,
    profile: ProfileInput,
    target_count: int,
    rng: random.Random,
) -> list[str]:
    """Ordered, unique career titles; may be longer than target_count."""
    labels = first_match(_LABEL_EXTRACTORS, text or "")
    if not labels:
        labels = generate_labels(profile)
    return pad_labels(dedupe_labels(labels), target_count, rng)
