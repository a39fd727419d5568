"""
Render component - Crawler-facing HTML for social previews.

Invariants:
- Output is deterministic given Meta
- No untrusted string reaches the document unescaped
- og:url, link[rel=canonical] and the refresh target are the canonical URL
"""

from __future__ import annotations

from ._impl import HTML_MEDIA_TYPE, build_cache_control, render_bot_html
from .models import RenderBotHtmlInput, RenderBotHtmlOutput


def run(inp: RenderBotHtmlInput) -> RenderBotHtmlOutput:
    """
    Main entry point for the render component.

    Returns the document plus the response headers the caller should attach.
    """
    headers: dict[str, str] = {}
    if inp.cache_policy is not None:
        headers["Cache-Control"] = build_cache_control(inp.cache_policy)

    return RenderBotHtmlOutput(
        html=render_bot_html(inp.meta),
        headers=headers,
        media_type=HTML_MEDIA_TYPE,
    )
