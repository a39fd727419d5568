"""
Shell component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ShellFetcherPort(Protocol):
    async def fetch_text(self, url: str) -> str:
        """Fetch the SPA root document. Raises FetchError."""
        ...
