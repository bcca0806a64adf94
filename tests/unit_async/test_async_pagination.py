from __future__ import annotations

import logging

import httpx
import pytest

from nextlink_client.core.async_pagination import aiterate_pages, drain_pages
from nextlink_client.core.errors import PageFetchError, PageFormatError, ResponseParseError
from nextlink_client.core.models import ApiResponse, ResponseOutcome
from tests.shared.transport import PagedFakeTransport, RoutedHandler, build_transport, make_page

P1 = "https://api.test/items"
P2 = "https://api.test/items?page=2"
P3 = "https://api.test/items?page=3"


@pytest.mark.asyncio
async def test_drain_pages_delivers_all_items_in_order():
    transport = PagedFakeTransport(
        {
            P1: make_page([1, 2], next_link=P2),
            P2: make_page([3, 4], next_link=P3),
            P3: make_page([5]),
        }
    )
    collected: list[object] = []

    ok = await drain_pages(transport, P1, collected.append, "tok", "listing failed")

    assert ok is True
    assert collected == [1, 2, 3, 4, 5]
    assert transport.uris == [P1, P2, P3]


@pytest.mark.asyncio
async def test_drain_pages_stops_on_failed_page_and_logs_message(caplog):
    transport = PagedFakeTransport(
        {
            P1: make_page(["a", "b"], next_link=P2),
            P2: None,
            P3: make_page(["e"]),
        }
    )
    collected: list[object] = []

    with caplog.at_level(logging.ERROR, logger="nextlink_client"):
        ok = await drain_pages(transport, P1, collected.append, "tok", "could not list vms")

    assert ok is False
    assert collected == ["a", "b"]
    assert transport.uris == [P1, P2]
    assert [record.getMessage() for record in caplog.records] == ["could not list vms"]


@pytest.mark.asyncio
async def test_drain_pages_empty_page_with_next_link_terminates():
    transport = PagedFakeTransport(
        {
            P1: make_page([1], next_link=P2),
            P2: make_page([], next_link=P3),
        }
    )
    collected: list[object] = []

    ok = await drain_pages(transport, P1, collected.append, "tok", "failed")

    assert ok is True
    assert collected == [1]
    assert transport.uris == [P1, P2]


@pytest.mark.asyncio
@pytest.mark.parametrize("next_link", [None, "", "   "])
async def test_drain_pages_blank_next_link_ends_sequence(next_link):
    page = {"value": [{"id": 1}]}
    if next_link is not None:
        page["nextLink"] = next_link
    transport = PagedFakeTransport({P1: page})
    collected: list[object] = []

    ok = await drain_pages(transport, P1, collected.append, "tok", "failed")

    assert ok is True
    assert collected == [{"id": 1}]
    assert transport.uris == [P1]


@pytest.mark.asyncio
async def test_drain_pages_first_page_failure_delivers_nothing():
    transport = PagedFakeTransport({P1: None})
    collected: list[object] = []

    assert await drain_pages(transport, P1, collected.append, "tok", "failed") is False
    assert collected == []


@pytest.mark.asyncio
async def test_drain_pages_callback_page_fetch_error_propagates(caplog):
    transport = PagedFakeTransport(
        {
            P1: make_page([{"id": "s1"}], next_link=P2),
            P2: make_page([{"id": "s2"}]),
        }
    )
    nested_failure = PageFetchError(
        "nested listing failed",
        response=ApiResponse(
            success=False,
            envelope={"StatusCode": 404},
            outcome=ResponseOutcome.HTTP_FAILURE,
        ),
    )

    def on_item(item: object) -> None:
        raise nested_failure

    with caplog.at_level(logging.ERROR, logger="nextlink_client"):
        with pytest.raises(PageFetchError) as exc_info:
            await drain_pages(transport, P1, on_item, "tok", "outer listing failed")

    assert exc_info.value is nested_failure
    assert transport.uris == [P1]
    assert all("outer listing failed" not in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_drain_pages_callback_error_propagates():
    transport = PagedFakeTransport(
        {
            P1: make_page([1, 2], next_link=P2),
            P2: make_page([3]),
        }
    )

    def on_item(item: object) -> None:
        if item == 2:
            raise RuntimeError("callback exploded")

    with pytest.raises(RuntimeError, match="callback exploded"):
        await drain_pages(transport, P1, on_item, "tok", "failed")
    assert transport.uris == [P1]


@pytest.mark.asyncio
async def test_drain_pages_rejects_malformed_value_field():
    transport = PagedFakeTransport({P1: {"value": "not-a-list"}})

    with pytest.raises(PageFormatError):
        await drain_pages(transport, P1, lambda item: None, "tok", "failed")


@pytest.mark.asyncio
async def test_drain_pages_uses_injected_logger():
    messages: list[str] = []

    class _ListHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            messages.append(record.getMessage())

    custom = logging.getLogger("tests.custom_pagination")
    custom.addHandler(_ListHandler())
    custom.setLevel(logging.ERROR)
    custom.propagate = False

    transport = PagedFakeTransport({P1: None})
    await drain_pages(transport, P1, lambda item: None, "tok", "subscriptions failed", logger=custom)

    assert messages == ["subscriptions failed"]


@pytest.mark.asyncio
async def test_drain_pages_over_http_follows_next_link_with_same_credential():
    handler = RoutedHandler(
        {
            P1: httpx.Response(200, json={"value": [{"id": "a"}], "nextLink": P2}),
            P2: httpx.Response(200, json={"value": [{"id": "b"}]}),
        }
    )
    transport = build_transport(handler)
    ids: list[str] = []

    ok = await drain_pages(transport, P1, lambda item: ids.append(item["id"]), "tok", "failed")

    assert ok is True
    assert ids == ["a", "b"]
    assert handler.urls == [P1, P2]
    await transport.close()


@pytest.mark.asyncio
async def test_drain_pages_over_http_malformed_body_propagates():
    handler = RoutedHandler({P1: httpx.Response(200, text="{broken")})
    transport = build_transport(handler)

    with pytest.raises(ResponseParseError):
        await drain_pages(transport, P1, lambda item: None, "tok", "failed")


@pytest.mark.asyncio
async def test_aiterate_pages_yields_pages_lazily():
    transport = PagedFakeTransport(
        {
            P1: make_page([1], next_link=P2),
            P2: make_page([2]),
        }
    )

    pages = aiterate_pages(transport, P1, "tok")
    first = await anext(pages)
    assert first.items == (1,)
    assert transport.uris == [P1]

    second = await anext(pages)
    assert second.items == (2,)
    assert second.is_last
    with pytest.raises(StopAsyncIteration):
        await anext(pages)


@pytest.mark.asyncio
async def test_aiterate_pages_raises_on_failed_page():
    transport = PagedFakeTransport({P1: make_page([1], next_link=P2), P2: None})

    seen: list[object] = []
    with pytest.raises(PageFetchError) as exc_info:
        async for page in aiterate_pages(transport, P1, "tok"):
            seen.extend(page.items)

    assert seen == [1]
    assert exc_info.value.status_code == 500
