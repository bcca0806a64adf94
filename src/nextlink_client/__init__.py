"""Public package exports for the nextLink REST helper client."""

from .async_client import AsyncNextLinkClient
from .config import NextLinkClientConfig, ParallelConfig, TransportConfig
from .core.async_pagination import aiterate_pages, drain_pages
from .core.async_parallel import run_all
from .core.async_transport import AsyncTransport
from .core.errors import (
    ClientClosedError,
    NextLinkError,
    PageFetchError,
    PageFormatError,
    RequestValidationError,
    ResponseParseError,
)
from .core.models import ApiResponse, RequestDescriptor, ResponseOutcome

__all__ = [
    "AsyncNextLinkClient",
    "AsyncTransport",
    "NextLinkClientConfig",
    "TransportConfig",
    "ParallelConfig",
    "RequestDescriptor",
    "ApiResponse",
    "ResponseOutcome",
    "drain_pages",
    "aiterate_pages",
    "run_all",
    "NextLinkError",
    "RequestValidationError",
    "ClientClosedError",
    "ResponseParseError",
    "PageFormatError",
    "PageFetchError",
]
