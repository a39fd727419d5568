"""
Preview Image Routes - Dynamic 1200x630 social preview image.

GET /api/og?type=post&id=...   or   GET /api/og?type=blog&slug=...
Unknown or incomplete parameters render the generic site card.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse, Response

from src.api.deps import (
    get_fetcher,
    get_image_cache_policy,
    get_origin,
    get_renderer,
    get_summary_repo,
)
from src.components.metadata import SummaryRepoPort, intent_from_query, resolve
from src.components.preview import ImageFetcherPort, PreviewRendererPort, render_preview_image
from src.components.render import CachePolicy, build_cache_control
from src.domain.branding import IMAGE_DESCRIPTION_MAX

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/og")
async def preview_image(
    entity_type: str | None = Query(default=None, alias="type"),
    post_id: str | None = Query(default=None, alias="id"),
    slug: str | None = None,
    origin: str = Depends(get_origin),
    repo: SummaryRepoPort = Depends(get_summary_repo),
    renderer: PreviewRendererPort = Depends(get_renderer),
    fetcher: ImageFetcherPort = Depends(get_fetcher),
    cache_policy: CachePolicy = Depends(get_image_cache_policy),
) -> Response:
    intent = intent_from_query(entity_type, post_id, slug)
    try:
        meta = await resolve(intent, origin, repo, description_limit=IMAGE_DESCRIPTION_MAX)
        image = await render_preview_image(meta, renderer, fetcher)
    except Exception:
        logger.exception("Preview image generation failed for %s", intent)
        return PlainTextResponse("Failed to generate image", status_code=500)

    return Response(
        content=image.content,
        media_type=image.media_type,
        headers={"Cache-Control": build_cache_control(cache_policy)},
    )
