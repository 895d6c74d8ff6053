from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*[{re.escape(_BULLET_CHARS)}]+\s*")
_NUMBER_PREFIX_RE = re.compile(r"^\s*(?:#\s*)?\d+\s*[\.\)]\s*")
_MARKDOWN_RE = re.compile(r"\*\*|__|`+|^#+\s*")
_TITLE_PREFIX_RE = re.compile(r"^\s*(?:title|career|profession)\s*:\s*", re.IGNORECASE)
_EDGE_PUNCT = " \t\"'“”‘’.,;:|-–—(["
_LEADING_NOISE_RE = re.compile(r"^[\s\)\]:,.\-–—|]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def strip_markdown(text: str) -> str:
    return _MARKDOWN_RE.sub("", text)


def label_key(label: str) -> str:
    return normalize_line(label).casefold()


def clean_label(raw: str) -> str:
    """Reduce a list item or heading fragment to a bare career title."""
    text = strip_markdown(normalize_line(raw))
    text = strip_bullet_prefix(text)
    text = _NUMBER_PREFIX_RE.sub("", text)
    text = _TITLE_PREFIX_RE.sub("", text)
    text = text.strip(_EDGE_PUNCT)
    if text.endswith(")") and "(" not in text:
        text = text.rstrip(")")
    return normalize_line(text)


def clean_description(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _LEADING_NOISE_RE.sub("", text)
    lines = []
    for raw_line in text.split("\n"):
        line = strip_bullet_prefix(strip_markdown(raw_line.strip()))
        line = normalize_line(line)
        if line:
            lines.append(line)
    return "\n".join(lines)


def dedupe_labels(labels: list[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for label in labels:
        key = label_key(label)
        if not key or key in seen:
            continue
        seen.add(key)
        ordered.append(label)
    return ordered
