"""Error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ApiResponse


class NextLinkError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause


class RequestValidationError(NextLinkError):
    """Invalid input / request rejected before any I/O."""


class ClientClosedError(NextLinkError):
    """Raised when a client or transport is used after close."""


class ResponseParseError(NextLinkError):
    """Response body is not a JSON object."""


class PageFormatError(NextLinkError):
    """Page fields (value / nextLink) have an unexpected shape."""


class PageFetchError(NextLinkError):
    """Raised when a page request fails while iterating pages."""

    def __init__(self, message: str, *, response: "ApiResponse") -> None:
        super().__init__(
            message,
            status_code=response.status_code,
            cause=response.outcome.value,
        )
        self.response = response


__all__ = [
    "NextLinkError",
    "RequestValidationError",
    "ClientClosedError",
    "ResponseParseError",
    "PageFormatError",
    "PageFetchError",
]
