"""
Preview component - 1200x630 social preview image.

Turns resolved Meta into a PreviewCard (pure), fetches the logo and the
entity photo best-effort, then hands composition to a renderer.

Invariants:
- Title <= 72, subtitle <= 130, publisher label <= 40 code points
- An unreachable logo or photo drops that element; it never fails the image
- Any composition failure surfaces as PreviewRenderError
"""

from __future__ import annotations

import asyncio
import logging

from src.components.metadata import ContentType, Meta, truncate
from src.domain.branding import (
    FALLBACK_IMAGE_URL,
    IMAGE_DESCRIPTION_MAX,
    LOGO_URL,
    PUBLISHER_LABEL_MAX,
    SITE_NAME,
    TITLE_MAX,
)
from src.ports.fetcher import FetchError

from .models import (
    PreviewAssets,
    PreviewCard,
    PreviewImage,
    PreviewRenderError,
    RenderPreviewInput,
)
from .ports import ImageFetcherPort, PreviewRendererPort

logger = logging.getLogger(__name__)


def build_preview_card(meta: Meta) -> PreviewCard:
    """Pure layout data for a Meta."""
    label = None
    if meta.content_type == ContentType.ARTICLE:
        label = truncate(meta.publisher_name or SITE_NAME, PUBLISHER_LABEL_MAX)

    photo_url = meta.image if meta.image and meta.image != FALLBACK_IMAGE_URL else None

    return PreviewCard(
        wordmark=SITE_NAME,
        title=truncate(meta.title, TITLE_MAX),
        subtitle=truncate(meta.description, IMAGE_DESCRIPTION_MAX),
        logo_url=LOGO_URL,
        label=label,
        photo_url=photo_url,
    )


async def _fetch_optional(fetcher: ImageFetcherPort, url: str | None) -> bytes | None:
    if not url:
        return None
    try:
        return await fetcher.fetch_bytes(url)
    except FetchError as e:
        logger.warning("Preview asset unavailable, drawing without it: %s", e)
        return None


async def render_preview_image(
    meta: Meta,
    renderer: PreviewRendererPort,
    fetcher: ImageFetcherPort,
) -> PreviewImage:
    """
    Render the preview image for a Meta.

    Assets are fetched sequentially; composition runs in a worker thread so
    the event loop stays free.

    Raises:
        PreviewRenderError: If the renderer fails for any reason.
    """
    card = build_preview_card(meta)
    assets = PreviewAssets(
        logo=await _fetch_optional(fetcher, card.logo_url),
        photo=await _fetch_optional(fetcher, card.photo_url),
    )

    try:
        content = await asyncio.to_thread(renderer.render, card, assets)
    except Exception as e:
        raise PreviewRenderError(f"Failed to compose preview for {meta.canonical_url}") from e

    return PreviewImage(content=content, width=card.width, height=card.height)


async def run(
    inp: RenderPreviewInput,
    *,
    renderer: PreviewRendererPort,
    fetcher: ImageFetcherPort,
) -> PreviewImage:
    """Main entry point for the preview component."""
    return await render_preview_image(inp.meta, renderer, fetcher)
