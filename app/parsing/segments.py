from __future__ import annotations

import re
from typing import Callable

from .matchers import first_match
from .text import clean_label

# "Title:" only counts at the start of a line; numbered career headings may appear inline.
_RECORD_BOUNDARY_RE = re.compile(
    r"^[ \t>#*-]*(?:\d+[.)][ \t]*)?(?:\*\*)?title(?:\*\*)?[ \t]*:"
    r"|(?<![^\s*#])(?:\*\*)?(?:(?:career|profession)(?:[ \t]+(?:option|path|suggestion))?|option)"
    r"[ \t]*#?[ \t]*\d+(?:\*\*)?[ \t]*:",
    re.IGNORECASE | re.MULTILINE,
)

PERCENT_MARKER_RE = re.compile(
    r"match(?:[ \t]+percentage)?[ \t]*[:=\-–][ \t]*\(?[ \t]*\d{1,3}[ \t]*%"
    r"|\([ \t]*\d{1,3}[ \t]*%[^)\n]*\)?"
    r"|\d{1,3}[ \t]*%",
    re.IGNORECASE,
)

# Bullet lines belong to a description; a parenthesized percentage must close the line.
_HEADER_LINE_RE = re.compile(
    r"^(?![ \t]*[-–—•◦▪●*·+][ \t])[ \t>*#]*(?:\d+[.)][ \t]*)?(?P<title>[^\n:%()]{2,80}?)[ \t]*(?:[-–—|:][ \t]*)?"
    r"(?:\([ \t]*\d{1,3}[ \t]*%(?:[ \t]*match)?[ \t]*\)[ \t*]*$"
    r"|\(?match(?:[ \t]+percentage)?[ \t]*[:\-–]?[ \t]*\d{1,3}[ \t]*%"
    r"|\d{1,3}[ \t]*%[ \t]*match)",
    re.IGNORECASE,
)

_NUMBERED_LINE_RE = re.compile(r"^[ \t]*\d+[.)][ \t]+\S")
_TITLE_STOP_RE = re.compile(r":|" + PERCENT_MARKER_RE.pattern, re.IGNORECASE)


def has_percent_marker(segment: str) -> bool:
    return PERCENT_MARKER_RE.search(segment) is not None


def is_header_line(line: str) -> bool:
    return _HEADER_LINE_RE.match(line) is not None


def split_on_record_markers(text: str) -> list[str] | None:
    """Split on Title:/Career N: style markers. The preamble is kept only when it reads as a record."""
    pieces = _RECORD_BOUNDARY_RE.split(text)
    if len(pieces) < 2:
        return None
    preamble, segments = pieces[0], pieces[1:]
    first_line = next((line for line in preamble.splitlines() if line.strip()), "")
    if first_line and is_header_line(first_line):
        segments.insert(0, preamble)
    return [segment for segment in segments if segment.strip()]


def _split_on_line_starts(text: str, is_start: Callable[[str], bool]) -> list[str] | None:
    segments: list[list[str]] = []
    for line in text.splitlines():
        if is_start(line):
            segments.append([line])
        elif segments:
            segments[-1].append(line)
    if not segments:
        return None
    return ["\n".join(lines) for lines in segments]


def split_on_header_lines(text: str) -> list[str] | None:
    return _split_on_line_starts(text, is_header_line)


def split_on_numbered_lines(text: str) -> list[str] | None:
    return _split_on_line_starts(text, lambda line: _NUMBERED_LINE_RE.match(line) is not None)


def _qualifying(splitter: Callable[[str], list[str] | None]) -> Callable[[str], list[str] | None]:
    def _segments(text: str) -> list[str] | None:
        segments = splitter(text)
        if not segments:
            return None
        kept = [segment for segment in segments if has_percent_marker(segment)]
        return kept or None

    return _segments


_RECORD_SEGMENTERS = (
    _qualifying(split_on_record_markers),
    _qualifying(split_on_header_lines),
    _qualifying(split_on_numbered_lines),
)


def record_segments(text: str) -> list[str]:
    """Segments that each look like one career record carrying a match percentage."""
    return first_match(_RECORD_SEGMENTERS, text or "") or []


def title_segments(text: str) -> list[str] | None:
    """Segments whose first line names a career, with or without a percentage."""
    return first_match((split_on_record_markers, split_on_header_lines), text or "")


def segment_title(segment: str) -> str | None:
    """Title is the first line up to a colon or percentage marker, whichever comes first."""
    first_line = next((line for line in segment.splitlines() if line.strip()), "")
    if not first_line:
        return None
    stop = _TITLE_STOP_RE.search(first_line)
    head = first_line[: stop.start()] if stop else first_line
    title = clean_label(head)
    return title or None
