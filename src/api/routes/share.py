"""
Share Routes - Bot-aware entry point for /blog/... links.

Crawlers get a synthesized HTML document carrying Open Graph and Twitter
Card tags for the blog or post; everyone else gets the single-page
application shell unchanged.
"""

import logging

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from src.api.deps import (
    get_bot_cache_policy,
    get_origin,
    get_shell_cache,
    get_shell_cache_control,
    get_summary_repo,
)
from src.components.classifier import is_bot
from src.components.metadata import SummaryRepoPort, parse_route_intent, resolve
from src.components.render import CachePolicy, RenderBotHtmlInput
from src.components.render import run as render_bot_html
from src.components.shell import ShellCache
from src.domain.branding import HTML_DESCRIPTION_MAX
from src.ports.fetcher import FetchError

logger = logging.getLogger(__name__)

router = APIRouter()


async def serve_shell(shell: ShellCache, origin: str, cache_control: str) -> Response:
    """SPA shell response, or 502 if the shell cannot be fetched."""
    try:
        html = await shell.get(origin)
    except FetchError as e:
        logger.error("SPA shell unavailable: %s", e)
        return PlainTextResponse("Upstream application shell unavailable", status_code=502)
    return HTMLResponse(content=html, headers={"Cache-Control": cache_control})


def raw_request_path(request: Request) -> str:
    """Request path exactly as sent, still percent-encoded."""
    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    return raw.split(b"?", 1)[0].decode("latin-1")


@router.get("/blog/{path:path}")
async def share(
    request: Request,
    user_agent: str | None = Header(default=None),
    origin: str = Depends(get_origin),
    repo: SummaryRepoPort = Depends(get_summary_repo),
    shell: ShellCache = Depends(get_shell_cache),
    shell_cache_control: str = Depends(get_shell_cache_control),
    cache_policy: CachePolicy = Depends(get_bot_cache_policy),
) -> Response:
    if not is_bot(user_agent):
        return await serve_shell(shell, origin, shell_cache_control)

    intent = parse_route_intent(raw_request_path(request))
    if not intent.is_resolvable:
        return await serve_shell(shell, origin, shell_cache_control)

    meta = await resolve(intent, origin, repo, description_limit=HTML_DESCRIPTION_MAX)
    out = render_bot_html(RenderBotHtmlInput(meta=meta, cache_policy=cache_policy))
    return HTMLResponse(content=out.html, headers=out.headers, media_type=out.media_type)
