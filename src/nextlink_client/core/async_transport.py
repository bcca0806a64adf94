"""Async HTTP transport with uniform success/failure signaling."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import NextLinkClientConfig
from .errors import ClientClosedError, RequestValidationError
from .models import ApiResponse, RequestDescriptor
from .response_parsing import build_api_response
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    build_request_headers,
)


class AsyncTransportClient(Protocol):
    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes | None = None,
    ) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport issuing one request per call, never retrying.

    The underlying client is shared by every call and safe for concurrent use.
    """

    def __init__(
        self,
        config: NextLinkClientConfig,
        *,
        client: AsyncTransportClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._logger = logger or logging.getLogger("nextlink_client")
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def invoke(
        self,
        descriptor: RequestDescriptor,
        credential: str,
        override_header: bool = False,
        string_body: str | None = None,
        byte_body: bytes | None = None,
    ) -> ApiResponse:
        if self._closed:
            raise ClientClosedError("transport is already closed")
        if string_body is not None and byte_body is not None:
            raise RequestValidationError("only one of string_body / byte_body may be set")

        content: bytes | None = None
        if string_body is not None:
            content = string_body.encode("utf-8")
        elif byte_body is not None:
            content = bytes(byte_body)

        headers = build_request_headers(
            credential,
            override_header=override_header,
            has_json_body=string_body is not None,
        )
        self._logger.debug("request start method=%s uri=%s", descriptor.method, descriptor.uri)

        try:
            response = await self._client.request(
                descriptor.method,
                descriptor.uri,
                headers=headers,
                content=content,
            )
        except Exception as exc:
            self._logger.error(
                "request transport error method=%s uri=%s error=%s",
                descriptor.method,
                descriptor.uri,
                str(exc) or exc.__class__.__name__,
            )
            return ApiResponse.transport_failure()

        result = build_api_response(response)
        self._logger.debug(
            "response received method=%s uri=%s status=%s",
            descriptor.method,
            descriptor.uri,
            result.status_code,
        )
        return result


__all__ = [
    "AsyncTransport",
]
