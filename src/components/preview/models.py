"""
Preview component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.components.metadata import Meta
from src.domain.branding import PREVIEW_HEIGHT, PREVIEW_WIDTH


@dataclass(frozen=True)
class PreviewCard:
    """
    Everything the renderer draws, already truncated.

    `label` is the publisher line shown above the title of articles.
    `photo_url` is None when the entity has no image of its own.
    """

    wordmark: str
    title: str
    subtitle: str
    logo_url: str
    label: str | None = None
    photo_url: str | None = None
    width: int = PREVIEW_WIDTH
    height: int = PREVIEW_HEIGHT


@dataclass(frozen=True)
class PreviewAssets:
    """Fetched image bytes; None when the asset was absent or unreachable."""

    logo: bytes | None = None
    photo: bytes | None = None


@dataclass(frozen=True)
class PreviewImage:
    content: bytes
    width: int = PREVIEW_WIDTH
    height: int = PREVIEW_HEIGHT
    media_type: str = "image/png"


@dataclass(frozen=True)
class RenderPreviewInput:
    meta: Meta


class PreviewRenderError(Exception):
    """Raised when the preview image cannot be composed."""
