"""Core request/response models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .errors import RequestValidationError

STATUS_CODE_FIELD = "StatusCode"
TRANSPORT_FAILURE_STATUS = 418


@dataclass(slots=True, frozen=True)
class RequestDescriptor:
    method: str
    uri: str

    def __post_init__(self) -> None:
        if not isinstance(self.method, str) or not self.method.strip():
            raise RequestValidationError("method must not be empty")
        if not isinstance(self.uri, str) or not self.uri.strip():
            raise RequestValidationError("uri must not be empty")
        normalized = self.method.strip().upper()
        if normalized != self.method:
            object.__setattr__(self, "method", normalized)

    @classmethod
    def get(cls, uri: str) -> "RequestDescriptor":
        return cls(method="GET", uri=uri)


class ResponseOutcome(str, Enum):
    """How a single request ended."""

    SUCCESS = "success"
    HTTP_FAILURE = "http_failure"
    TRANSPORT_ERROR = "transport_error"


@dataclass(slots=True, frozen=True)
class ApiResponse:
    """Normalized result of one request.

    ``envelope`` always carries ``StatusCode``. A transport failure uses the
    418 sentinel there; ``outcome`` tells it apart from a real 418 reply.
    Iterating yields ``(success, envelope)``.
    """

    success: bool
    envelope: dict[str, object]
    outcome: ResponseOutcome

    @property
    def status_code(self) -> int | None:
        value = self.envelope.get(STATUS_CODE_FIELD)
        return value if isinstance(value, int) else None

    @property
    def is_transport_error(self) -> bool:
        return self.outcome is ResponseOutcome.TRANSPORT_ERROR

    def __iter__(self) -> Iterator[object]:
        yield self.success
        yield self.envelope

    @classmethod
    def transport_failure(cls) -> "ApiResponse":
        return cls(
            success=False,
            envelope={STATUS_CODE_FIELD: TRANSPORT_FAILURE_STATUS},
            outcome=ResponseOutcome.TRANSPORT_ERROR,
        )


__all__ = [
    "STATUS_CODE_FIELD",
    "TRANSPORT_FAILURE_STATUS",
    "RequestDescriptor",
    "ResponseOutcome",
    "ApiResponse",
]
