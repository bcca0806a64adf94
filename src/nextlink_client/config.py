"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings.

    Read/write timeouts are generous so that large payload transfers can finish.
    """

    timeout_connect_seconds: float = 30.0
    timeout_read_seconds: float = 1800.0
    timeout_write_seconds: float = 1800.0
    timeout_pool_seconds: float = 30.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class ParallelConfig:
    """Parallel runner settings. A limit of 0 runs every item at once."""

    concurrency_limit: int = 0

    def validate(self) -> None:
        if isinstance(self.concurrency_limit, bool) or not isinstance(self.concurrency_limit, int):
            raise ValueError("parallel.concurrency_limit must be int")
        if self.concurrency_limit < 0:
            raise ValueError("parallel.concurrency_limit must be >= 0")


@dataclass(slots=True, frozen=True)
class NextLinkClientConfig:
    """Runtime configuration for the nextLink client."""

    user_agent: str = "nextlink-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    parallel: ParallelConfig = field(default_factory=ParallelConfig)

    def validate(self) -> None:
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        self.transport.validate()
        self.parallel.validate()


__all__ = [
    "TransportConfig",
    "ParallelConfig",
    "NextLinkClientConfig",
]
