from __future__ import annotations

import math
import re
import unicodedata
from typing import Optional

from ..core.exceptions import InvalidCoordinates, NotesLengthInvalid, ValidationError

_ZERO_WIDTH_RE = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")
_WHITESPACE_RE = re.compile(r"[ \t\f\v\u00a0]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def normalize_text(value: Optional[str]) -> str:
    """NFC-normalise, strip zero-width characters and collapse runs of whitespace.

    Line breaks survive (a daily summary is multi-line); spaces inside a line
    collapse to one and each line is trimmed.
    """
    if not value:
        return ""
    text = unicodedata.normalize("NFC", value)
    text = _ZERO_WIDTH_RE.sub("", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [_WHITESPACE_RE.sub(" ", line).strip() for line in text.split("\n")]
    text = "\n".join(lines)
    return _BLANK_LINES_RE.sub("\n\n", text).strip()


def require_length_between(value: str, field_name: str, min_len: int, max_len: int) -> str:
    if not (min_len <= len(value) <= max_len):
        raise NotesLengthInvalid(f"{field_name} must be between {min_len} and {max_len} characters")
    return value


def validate_coordinates(latitude: float, longitude: float) -> None:
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinates("Coordinates must be numbers") from e

    if math.isnan(lat) or math.isnan(lon):
        raise InvalidCoordinates("Coordinates must be numbers")
    if not -90 <= lat <= 90:
        raise InvalidCoordinates("Invalid latitude")
    if not -180 <= lon <= 180:
        raise InvalidCoordinates("Invalid longitude")
