"""
Read-only data store port.

The hosted relational store is reached through a REST query interface with
explicit column projection and equality filters. This service never writes.
"""

from __future__ import annotations

from typing import Any, Protocol


class DataStorePort(Protocol):
    async def select(
        self,
        table: str,
        *,
        columns: str,
        filters: dict[str, str],
        limit: int = 1,
    ) -> list[dict[str, Any]]:
        """
        Run a projected, filtered read against a table.

        Args:
            table: Table or view name
            columns: Explicit projection, e.g. "headline,blogs(blog_name)"
            filters: Column -> value equality filters
            limit: Maximum rows to return

        Raises:
            DataStoreError: On transport failure, non-2xx status or a body
                that is not a JSON array.
        """
        ...


class DataStoreError(Exception):
    """Base class for data store failures."""


class DataStoreUnavailableError(DataStoreError):
    """Raised when the store cannot be reached or times out."""


class DataStoreResponseError(DataStoreError):
    """Raised when the store answers with an error status or malformed body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
