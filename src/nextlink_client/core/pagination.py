"""Page field helpers for nextLink-style list endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import PageFormatError
from .json_values import get_list, get_str, is_blank

ITEMS_FIELD = "value"
NEXT_LINK_FIELD = "nextLink"


def parse_next_link(payload: Mapping[str, object]) -> str | None:
    try:
        raw = get_str(payload, NEXT_LINK_FIELD)
    except TypeError as exc:
        raise PageFormatError("nextLink has unsupported type") from exc
    if is_blank(raw):
        return None
    return raw


def extract_items(payload: Mapping[str, object]) -> list[object]:
    try:
        items = get_list(payload, ITEMS_FIELD)
    except TypeError as exc:
        raise PageFormatError("value is not an array") from exc
    return items if items is not None else []


@dataclass(slots=True, frozen=True)
class Page:
    items: tuple[object, ...]
    next_link: str | None
    envelope: Mapping[str, object]

    @classmethod
    def from_envelope(cls, envelope: Mapping[str, object]) -> "Page":
        return cls(
            items=tuple(extract_items(envelope)),
            next_link=parse_next_link(envelope),
            envelope=envelope,
        )

    @property
    def is_last(self) -> bool:
        # An empty page ends the sequence even when it still carries a nextLink.
        return self.next_link is None or not self.items


__all__ = [
    "ITEMS_FIELD",
    "NEXT_LINK_FIELD",
    "parse_next_link",
    "extract_items",
    "Page",
]
