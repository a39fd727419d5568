"""
Preview component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import PreviewAssets, PreviewCard


class PreviewRendererPort(Protocol):
    """Composes a card into encoded image bytes. CPU bound, synchronous."""

    def render(self, card: PreviewCard, assets: PreviewAssets) -> bytes:
        """Render the card to PNG bytes."""
        ...


class ImageFetcherPort(Protocol):
    async def fetch_bytes(self, url: str) -> bytes:
        """Fetch image bytes. Raises FetchError."""
        ...
