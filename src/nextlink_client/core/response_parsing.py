"""Response body parsing helpers."""

from __future__ import annotations

import json
from typing import Protocol

from .errors import ResponseParseError
from .models import STATUS_CODE_FIELD, ApiResponse, ResponseOutcome


class TextPayloadResponse(Protocol):
    status_code: int

    @property
    def text(self) -> str: ...


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def parse_json_payload(text: str, *, status_code: int | None) -> dict[str, object]:
    """Parse a JSON object body. Blank bodies parse as an empty object."""

    if text is None or text.strip() == "":
        return {}
    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise ResponseParseError(
            "response body is not valid JSON",
            status_code=status_code,
        ) from exc

    if not isinstance(payload, dict):
        raise ResponseParseError(
            "response JSON root must be an object",
            status_code=status_code,
        )
    return payload


def build_api_response(response: TextPayloadResponse) -> ApiResponse:
    status_code = response.status_code
    envelope = parse_json_payload(response.text, status_code=status_code)
    envelope[STATUS_CODE_FIELD] = status_code
    success = is_success_status(status_code)
    return ApiResponse(
        success=success,
        envelope=envelope,
        outcome=ResponseOutcome.SUCCESS if success else ResponseOutcome.HTTP_FAILURE,
    )


__all__ = [
    "is_success_status",
    "parse_json_payload",
    "build_api_response",
]
