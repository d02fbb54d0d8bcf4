"""
Payload shaping shared by the admin services.

Forms send empty strings for untouched optional fields; these helpers turn
them into nulls before a write and keep updates from blanking stored data.
"""
import math
from typing import Any, Dict, Iterable, Optional


def clean_str(value: Optional[str]) -> Optional[str]:
    """Trims a string; blank becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def compact_update(data: Dict[str, Any], always: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Drops null/blank values from an update payload.

    Keys listed in ``always`` are kept even when null, so required fields and
    flags are always written.
    """
    keep = set(always)
    return {
        key: value
        for key, value in data.items()
        if key in keep or not is_blank(value)
    }


def apply_changes(obj, changes: Dict[str, Any]):
    for key, value in changes.items():
        setattr(obj, key, value)
    return obj


def to_number(value: Any, cast=float):
    """Coerces a form number; anything unparsable (or NaN/inf) becomes 0."""
    if value is None or value == "":
        return cast(0)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return cast(0)
    if math.isnan(number) or math.isinf(number):
        return cast(0)
    return cast(number)


def drop_nulls(data: Dict[str, Any], nullable: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Drops explicit nulls from a partial update so NOT NULL columns keep their
    stored value. Keys in ``nullable`` may still be cleared with null.
    """
    keep = set(nullable)
    return {key: value for key, value in data.items() if value is not None or key in keep}
