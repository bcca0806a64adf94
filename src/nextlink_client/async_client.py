"""Public async client entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from types import TracebackType
from typing import TypeVar

from .client_shared import resolve_concurrency_limit, validate_client_config
from .config import NextLinkClientConfig
from .core import async_pagination, async_parallel
from .core.async_transport import AsyncTransport
from .core.errors import ClientClosedError
from .core.models import ApiResponse, RequestDescriptor

T = TypeVar("T")


class AsyncNextLinkClient:
    """Owns one shared transport and exposes request, pagination and parallel helpers."""

    def __init__(
        self,
        *,
        config: NextLinkClientConfig | None = None,
        transport: AsyncTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or NextLinkClientConfig()
        validate_client_config(self._config)

        self._logger = logger or logging.getLogger("nextlink_client")
        self._transport = transport or AsyncTransport(self._config, logger=self._logger)
        self._closed = False

    @property
    def transport(self) -> AsyncTransport:
        return self._transport

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError("AsyncNextLinkClient is already closed")

    async def invoke(
        self,
        descriptor: RequestDescriptor,
        credential: str,
        override_header: bool = False,
        string_body: str | None = None,
        byte_body: bytes | None = None,
    ) -> ApiResponse:
        self._ensure_open()
        return await self._transport.invoke(
            descriptor,
            credential,
            override_header=override_header,
            string_body=string_body,
            byte_body=byte_body,
        )

    async def drain_pages(
        self,
        initial_uri: str,
        on_item: Callable[[object], None],
        credential: str,
        failure_message: str,
    ) -> bool:
        self._ensure_open()
        return await async_pagination.drain_pages(
            self._transport,
            initial_uri,
            on_item,
            credential,
            failure_message,
            logger=self._logger,
        )

    async def run_all(
        self,
        items: Sequence[T],
        op: Callable[[T], Awaitable[bool]],
        concurrency_limit: int | None = None,
    ) -> bool:
        self._ensure_open()
        return await async_parallel.run_all(
            items,
            op,
            resolve_concurrency_limit(config=self._config, concurrency_limit=concurrency_limit),
            logger=self._logger,
        )

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncNextLinkClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncNextLinkClient",
]
