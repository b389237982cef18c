from collections.abc import Mapping
from typing import Any, Optional

# The records carry no explicit tag, so the variant is read off the shape:
# the python type of `value` and whether `values` is present.


def _read(candidate: Any, key: str) -> Any:
    if isinstance(candidate, Mapping):
        return candidate.get(key)
    return getattr(candidate, key, None)


def _resolve(candidate: Any, text: str, number: str, select: str) -> Optional[str]:
    value = _read(candidate, "value")

    if isinstance(value, str):
        # `values` wins over plain text, even on a text-valued record
        if _read(candidate, "values") is not None:
            return select
        return text

    # bool is an int subclass, but it is not a number here
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return number

    return None


def resolve_field_type(candidate: Any) -> Optional[str]:
    """Name of the `Field` implementation a record represents.

    Returns "TextField", "NumberField" or "SelectField", or None when the
    record matches none of them. Never raises.
    """
    return _resolve(candidate, "TextField", "NumberField", "SelectField")


def resolve_fancy_type(candidate: Any) -> Optional[str]:
    """Same discrimination as `resolve_field_type`, for a fancy `type` payload."""
    return _resolve(
        candidate,
        "FancyFieldTextType",
        "FancyFieldNumberType",
        "FancyFieldSelectType",
    )
