"""
Range classification for report values.

A classification is an ordered list of inclusive [min, max] ranges, each
with a label and a color tag. The first range that contains the value
wins. Ranges are NOT sorted or merged: when two ranges overlap, the one
declared first takes the value.
"""

import math
import re
from collections.abc import Mapping
from typing import Any, Optional

OUT_OF_RANGE = {"label": "Out of Range", "color": "gray"}

# Longest leading decimal literal, e.g. "  51.5 bpm" -> "51.5"
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: Any) -> Optional[float]:
    """Lenient float parse: numbers pass through, strings use their numeric prefix.

    Returns None for None, booleans, containers, and text that does not
    start with a number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # ints too large for a float
            return math.inf if value > 0 else -math.inf
        return None if math.isnan(number) else number
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        return float(match.group(1)) if match else None
    return None


def classify_value(value: Any, classification: Any) -> Optional[dict]:
    """Return {"label", "color"} for ``value``, or None.

    None when the classification is missing or has no range list, or
    when the value is not numeric. OUT_OF_RANGE when a numeric value
    falls outside every range.
    """
    ranges = _ranges_of(classification)
    if ranges is None:
        return None

    number = parse_number(value)
    if number is None:
        return None

    for entry in ranges:
        entry = _as_mapping(entry)
        if entry is None:
            continue
        low, high = parse_number(entry.get("min")), parse_number(entry.get("max"))
        if low is None or high is None:
            continue
        if low <= number <= high:
            return {"label": entry.get("label"), "color": entry.get("color", "gray")}

    return dict(OUT_OF_RANGE)


def _ranges_of(classification: Any) -> Optional[list]:
    classification = _as_mapping(classification)
    if not classification:
        return None
    ranges = classification.get("ranges")
    if not isinstance(ranges, list):
        return None
    return ranges


def _as_mapping(obj: Any) -> Optional[Mapping]:
    """Accept plain dicts as well as the pydantic config models."""
    if isinstance(obj, Mapping):
        return obj
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    return None
