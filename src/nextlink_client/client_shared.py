"""Shared helpers for client bootstrap."""

from __future__ import annotations

from .config import NextLinkClientConfig
from .core.errors import RequestValidationError


def validate_client_config(config: NextLinkClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise RequestValidationError(str(exc)) from exc


def resolve_concurrency_limit(
    *,
    config: NextLinkClientConfig,
    concurrency_limit: int | None,
) -> int:
    if concurrency_limit is not None:
        return concurrency_limit
    return config.parallel.concurrency_limit


__all__ = [
    "validate_client_config",
    "resolve_concurrency_limit",
]
