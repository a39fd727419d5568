"""
Metadata Routes - Resolved preview metadata as JSON.

Lets operators see exactly what a crawler would be shown for a path.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query

from src.api.deps import get_origin, get_summary_repo
from src.components.metadata import ResolveInput, SummaryRepoPort, parse_route_intent
from src.components.metadata import run as resolve_metadata
from src.components.render import build_meta_tags

router = APIRouter()


@router.get("/meta")
async def describe_path(
    path: str = Query(..., min_length=1),
    origin: str = Depends(get_origin),
    repo: SummaryRepoPort = Depends(get_summary_repo),
) -> dict[str, Any]:
    intent = parse_route_intent(path)
    out = await resolve_metadata(ResolveInput(intent=intent, origin=origin), repo=repo)
    meta = out.meta
    return {
        "path": path,
        "intent": {
            "kind": intent.kind.value,
            "blog_slug": intent.blog_slug or None,
            "post_id": intent.post_id,
        },
        "serves_shell": out.should_serve_shell,
        "meta": {
            "title": meta.title,
            "description": meta.description,
            "image": meta.image,
            "canonical_url": meta.canonical_url,
            "content_type": meta.content_type.value,
            "preview_image_url": meta.preview_image_url,
            "publisher_name": meta.publisher_name,
            "is_fallback": meta.is_fallback,
        },
        "tags": [
            {"name": t.name, "property": t.property, "content": t.content}
            for t in build_meta_tags(meta)
        ],
    }
