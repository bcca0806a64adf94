"""Async pagination driver following nextLink."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import aclosing
from typing import Protocol

from .errors import PageFetchError
from .models import ApiResponse, RequestDescriptor
from .pagination import Page


class PageRequester(Protocol):
    async def invoke(
        self,
        descriptor: RequestDescriptor,
        credential: str,
        override_header: bool = False,
        string_body: str | None = None,
        byte_body: bytes | None = None,
    ) -> ApiResponse: ...


async def aiterate_pages(
    transport: PageRequester,
    initial_uri: str,
    credential: str,
) -> AsyncIterator[Page]:
    """Yield pages one at a time; the next page is fetched only when asked for."""

    current_uri = initial_uri
    while True:
        response = await transport.invoke(RequestDescriptor.get(current_uri), credential)
        if not response.success:
            raise PageFetchError(f"page request failed uri={current_uri}", response=response)

        page = Page.from_envelope(response.envelope)
        yield page

        if page.is_last:
            return
        current_uri = page.next_link


async def drain_pages(
    transport: PageRequester,
    initial_uri: str,
    on_item: Callable[[object], None],
    credential: str,
    failure_message: str,
    *,
    logger: logging.Logger | None = None,
) -> bool:
    """Deliver every item of every page to ``on_item`` in page order.

    Returns False as soon as a page request fails, after logging
    ``failure_message``. Items from pages already drained stay delivered.
    """

    log = logger or logging.getLogger("nextlink_client")
    async with aclosing(aiterate_pages(transport, initial_uri, credential)) as pages:
        while True:
            # Only the fetch is guarded; errors from on_item propagate.
            try:
                page = await anext(pages)
            except StopAsyncIteration:
                return True
            except PageFetchError as exc:
                log.error("%s", failure_message)
                log.debug(
                    "pagination stopped status=%s cause=%s",
                    exc.status_code,
                    exc.cause,
                )
                return False
            for item in page.items:
                on_item(item)


__all__ = [
    "aiterate_pages",
    "drain_pages",
]
