from __future__ import annotations

import re
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def first_match(matchers: Iterable[Callable[[str], T | None]], text: str) -> T | None:
    """Run matchers in order and return the first non-None result."""
    for matcher in matchers:
        result = matcher(text)
        if result is not None:
            return result
    return None


def regex_int(pattern: str, flags: int = re.IGNORECASE) -> Callable[[str], int | None]:
    compiled = re.compile(pattern, flags)

    def _match(text: str) -> int | None:
        found = compiled.search(text)
        if not found:
            return None
        try:
            return int(found.group(1))
        except (IndexError, ValueError):
            return None

    _match.__name__ = f"regex_int[{pattern}]"
    return _match


def regex_span_int(
    pattern: str,
    *,
    low: int,
    high: int,
    flags: int = re.IGNORECASE,
) -> Callable[[str], tuple[int, int] | None]:
    """Match an integer in group 1 and return (value, end offset); out-of-range values are misses."""
    compiled = re.compile(pattern, flags)

    def _match(text: str) -> tuple[int, int] | None:
        for found in compiled.finditer(text):
            value = int(found.group(1))
            if low <= value <= high:
                return value, found.end()
        return None

    _match.__name__ = f"regex_span_int[{pattern}]"
    return _match
