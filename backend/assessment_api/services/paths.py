"""
Path lookups into raw assessment records.

Assessment configs point at values with small path expressions. Two forms
are understood, and nothing else:

1. Dot traversal: "vitalsMap.vitals.heart_rate". A segment may end in a
   list index, "setList[0]".
2. One array filter: "exercises[?(@.id==235)].analysisScore". The first
   element of the array whose field loosely equals the literal is picked,
   then the remaining path is resolved against it.

This is deliberately not a JSONPath evaluator: no wildcards, no multiple
or nested filters.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

# array_path[?(@.field==value)].remaining_path
FILTER_PATTERN = re.compile(r"^(.+?)\[\?\(@\.([^=\]]+)==(.+?)\)\]\.(.+)$")

# name[3]
INDEXED_SEGMENT = re.compile(r"^(.+)\[(\d+)\]$")

_MISSING = object()


def get_value_from_path(record: Any, path: Optional[str]) -> Any:
    """Resolve ``path`` inside ``record``.

    Returns None when the record is missing, the path is empty, or any
    segment along the way is absent. Falsy leaf values (0, False, "")
    are returned as they are.
    """
    if not path or not record:
        return None

    match = FILTER_PATTERN.match(path)
    if match:
        array_path, field, literal, remaining_path = match.groups()
        return _resolve_filter(record, array_path, field, literal, remaining_path)

    current = record
    for segment in path.split("."):
        current = _step(current, segment)
        if current is _MISSING:
            return None
    return current


def _resolve_filter(record, array_path, field, literal, remaining_path):
    items = get_value_from_path(record, array_path)
    if not isinstance(items, list):
        return None

    literal = literal.strip().strip("'\"")
    for item in items:
        if isinstance(item, Mapping) and field in item and loose_equals(item[field], literal):
            return get_value_from_path(item, remaining_path)
    return None


def _step(current: Any, segment: str) -> Any:
    """Take one dot-separated step, returning _MISSING when it can't."""
    index = None
    indexed = INDEXED_SEGMENT.match(segment)
    if indexed and not (isinstance(current, Mapping) and segment in current):
        segment, index = indexed.group(1), int(indexed.group(2))

    if not isinstance(current, Mapping) or segment not in current:
        return _MISSING
    value = current[segment]

    if index is None:
        return value
    if not isinstance(value, list) or index >= len(value):
        return _MISSING
    return value[index]


def loose_equals(actual: Any, literal: str) -> bool:
    """Compare a record value with a path literal.

    Literals are always text, so 235 == "235" and 1.5 == "1.50" match.
    """
    if actual is None or isinstance(actual, (Mapping, list)):
        return False
    if isinstance(actual, bool):
        return str(actual).lower() == literal.lower()
    if str(actual) == literal:
        return True
    try:
        return float(actual) == float(literal)
    except (TypeError, ValueError, OverflowError):
        return False
