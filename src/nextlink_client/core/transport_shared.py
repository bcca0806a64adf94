"""Shared helpers for transport construction and request headers."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import NextLinkClientConfig

JSON_CONTENT_TYPE = "application/json"


def build_default_headers(config: NextLinkClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: NextLinkClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_authorization(credential: str, *, override_header: bool) -> str:
    return credential if override_header else f"Bearer {credential}"


def build_request_headers(
    credential: str,
    *,
    override_header: bool,
    has_json_body: bool,
) -> dict[str, str]:
    headers = {
        "Accept": JSON_CONTENT_TYPE,
        "Authorization": build_authorization(credential, override_header=override_header),
    }
    if has_json_body:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    return headers


__all__ = [
    "JSON_CONTENT_TYPE",
    "build_default_headers",
    "build_default_timeout",
    "build_authorization",
    "build_request_headers",
]
