"""Text cleanup and lenient number parsing for scraped profile fields."""

import math
import re

_WHITESPACE_RE = re.compile(r"\s+")
_NUMBER_RE = re.compile(r"(\d+(?:\.\d+)?)")


def clean_text(text: str | None) -> str:
    """Trim, collapse whitespace runs to one space, and drop line breaks."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text.strip()).replace("\n", "").replace("\r", "")


def parse_int(text: str | None) -> int | None:
    """Parse the leading integer of a string ('1,234 hours' -> 1234).

    Returns None when the text does not start with a number.
    """
    if not text:
        return None
    match = re.match(r"\s*(\d[\d,]*)", text)
    if not match:
        return None
    return int(match.group(1).replace(",", ""))


def parse_float(text: str | None) -> float | None:
    """Parse the leading decimal number of a string ('4.9 of 5' -> 4.9)."""
    if not text:
        return None
    match = re.match(r"\s*(\d+(?:\.\d+)?)", text)
    if not match:
        return None
    return float(match.group(1))


def parse_rate(text: str | None) -> float:
    """Parse a display rate such as '$45.00/hr' into a number, 0 if unparsable."""
    if not text:
        return 0
    digits = re.sub(r"[^0-9.]", "", text)
    try:
        value = float(digits)
    except ValueError:
        return 0
    return to_number(value)


def parse_percentage(text: str | None) -> float:
    """Parse a display percentage such as '98% Job Success' into 98, 0 if unparsable."""
    if not text:
        return 0
    match = re.search(r"(\d+(?:\.\d+)?)\s*%", text) or _NUMBER_RE.search(text)
    if not match:
        return 0
    return to_number(float(match.group(1)))


def to_number(value) -> float:
    """Coerce an untrusted value to a finite number; anything else becomes 0.

    Integral floats come back as ints so they serialize as 45 rather than 45.0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        if value.is_integer():
            return int(value)
    return value


def word_count(text: str | None) -> int:
    """Count whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())
