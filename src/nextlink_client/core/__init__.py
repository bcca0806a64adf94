"""Core transport, pagination and parallel execution."""

__all__: list[str] = []
