"""
Bot HTML synthesis.

Builds the minimal document served to crawlers: Open Graph and Twitter Card
tags for the preview, plus a meta refresh and a visible link that send any
HTML-only client on to the canonical, human-facing URL.

Key behaviors:
- Every interpolated string is escaped
- Output depends only on Meta (no clocks, no randomness), so it can sit in
  a shared cache
"""

from __future__ import annotations

from src.components.metadata import Meta
from src.domain.branding import PREVIEW_HEIGHT, PREVIEW_WIDTH, SITE_NAME, TWITTER_HANDLE

from .models import CachePolicy, MetaTag

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


def escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def build_meta_tags(meta: Meta) -> list[MetaTag]:
    """Full Open Graph + Twitter Card tag set for a Meta."""
    image = meta.preview_image_url or meta.image

    tags = [
        MetaTag(name="description", content=meta.description),
        # Open Graph
        MetaTag(property="og:title", content=meta.title),
        MetaTag(property="og:description", content=meta.description),
        MetaTag(property="og:image", content=image),
        MetaTag(property="og:image:width", content=str(PREVIEW_WIDTH)),
        MetaTag(property="og:image:height", content=str(PREVIEW_HEIGHT)),
        MetaTag(property="og:url", content=meta.canonical_url),
        MetaTag(property="og:type", content=meta.content_type.value),
        MetaTag(property="og:site_name", content=SITE_NAME),
        # Twitter Card
        MetaTag(name="twitter:card", content="summary_large_image"),
        MetaTag(name="twitter:site", content=TWITTER_HANDLE),
        MetaTag(name="twitter:title", content=meta.title),
        MetaTag(name="twitter:description", content=meta.description),
        MetaTag(name="twitter:image", content=image),
    ]

    if meta.publisher_name:
        tags.append(MetaTag(property="article:publisher", content=meta.publisher_name))

    return tags


def render_meta_tags_html(tags: list[MetaTag]) -> str:
    """Render MetaTags to HTML meta tag string."""
    html_parts: list[str] = []

    for tag in tags:
        if tag.property:
            html_parts.append(
                f'<meta property="{escape_html(tag.property)}" '
                f'content="{escape_html(tag.content)}" />'
            )
        elif tag.name:
            html_parts.append(
                f'<meta name="{escape_html(tag.name)}" content="{escape_html(tag.content)}" />'
            )

    return "\n    ".join(html_parts)


def render_bot_html(meta: Meta) -> str:
    """
    Render the complete crawler-facing HTML document for a Meta.

    The refresh target and the fallback link both point at the canonical URL.
    """
    title = escape_html(meta.title)
    url = escape_html(meta.canonical_url)
    meta_html = render_meta_tags_html(build_meta_tags(meta))

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <title>{title}</title>
    {meta_html}
    <link rel="canonical" href="{url}" />
    <meta http-equiv="refresh" content="0; url={url}" />
</head>
<body>
    <p>Redirecting to <a href="{url}">{title}</a>&hellip;</p>
</body>
</html>"""


def build_cache_control(policy: CachePolicy) -> str:
    """Shared-cache directive: short freshness, longer stale-while-revalidate."""
    return (
        f"public, s-maxage={policy.s_maxage_seconds}, "
        f"stale-while-revalidate={policy.stale_while_revalidate_seconds}"
    )
