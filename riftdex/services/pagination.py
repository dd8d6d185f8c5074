"""
Lenient pagination parameters.

Bad page or limit values never fail a request: they fall back to the
default or are clamped into range.
"""

import math
import re
from dataclasses import dataclass

from riftdex.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MIN_PAGE_SIZE

# ASCII digits only; str.isdigit() also accepts superscripts that int() rejects
LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# Larger values are read as this, which still clamps to the same results
MAX_PARSED_DIGITS = 9
MAX_PARSED_INT = 10**MAX_PARSED_DIGITS - 1


def _parse_int(value: str | int | None) -> int | None:
    """Leading-integer parse; None when there is no number to read."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    match = LEADING_INT.match(value)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    number = MAX_PARSED_INT if len(digits) > MAX_PARSED_DIGITS else int(digits)
    return -number if sign == "-" else number


def normalize_page(value: str | int | None) -> int:
    """Page number, 1-based. Missing, non-numeric, or < 1 becomes 1."""
    page = _parse_int(value)
    if not page:
        return DEFAULT_PAGE
    return max(DEFAULT_PAGE, page)


def normalize_limit(value: str | int | None) -> int:
    """
    Page size in [1, 100].

    Missing, non-numeric, or zero becomes the default of 20; anything
    else is clamped to the nearest bound.
    """
    limit = _parse_int(value)
    if not limit:
        return DEFAULT_PAGE_SIZE
    return min(MAX_PAGE_SIZE, max(MIN_PAGE_SIZE, limit))


def total_pages(total: int, limit: int) -> int:
    """Number of pages; an empty result still reports one page."""
    return max(1, math.ceil(total / limit))


@dataclass(frozen=True, slots=True)
class PageRequest:
    """A normalized page window."""

    page: int
    limit: int

    @classmethod
    def from_query(cls, page: str | int | None, limit: str | int | None) -> "PageRequest":
        return cls(page=normalize_page(page), limit=normalize_limit(limit))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
