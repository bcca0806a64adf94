"""Predicates and typed accessors over parsed JSON values.

Parsed bodies are plain ``dict``/``list``/``str``/number/``None`` trees. An
absent key, a JSON ``null`` and an empty string are kept distinct: absent keys
read as ``MISSING``, ``null`` as ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def get_field(payload: Mapping[str, object], key: str) -> object:
    if key not in payload:
        return MISSING
    return payload[key]


def get_str(payload: Mapping[str, object], key: str) -> str | None:
    value = get_field(payload, key)
    if value is MISSING or value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def get_list(payload: Mapping[str, object], key: str) -> list[object] | None:
    value = get_field(payload, key)
    if value is MISSING or value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"{key} must be an array, got {type(value).__name__}")
    return value


def is_blank(text: str | None) -> bool:
    return text is None or text.strip() == ""


def is_null_or_empty(value: object) -> bool:
    if value is MISSING or value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def contains(value: object, item: object) -> bool:
    """Search ``value`` for ``item`` according to its JSON type.

    Strings are searched for ``str(item)``, arrays for an equal element and
    objects for a key named ``str(item)``. Any other type never contains anything.
    """

    if isinstance(value, str):
        return str(item) in value
    if isinstance(value, list):
        return any(element == item for element in value)
    if isinstance(value, dict):
        return str(item) in value
    return False


__all__ = [
    "MISSING",
    "get_field",
    "get_str",
    "get_list",
    "is_blank",
    "is_null_or_empty",
    "contains",
]
