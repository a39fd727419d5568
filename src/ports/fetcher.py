from typing import Protocol


class FetcherPort(Protocol):
    async def fetch_bytes(self, url: str) -> bytes:
        """Fetch a remote resource. Raises FetchError."""
        ...

    async def fetch_text(self, url: str) -> str:
        """Fetch a remote document as text. Raises FetchError."""
        ...


class FetchError(Exception):
    """Raised when an upstream resource cannot be fetched."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")
