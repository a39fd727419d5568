"""
Render component - Crawler-facing HTML with Open Graph / Twitter Card tags.
"""

from ._impl import (
    HTML_MEDIA_TYPE,
    build_cache_control,
    build_meta_tags,
    escape_html,
    render_bot_html,
    render_meta_tags_html,
)
from .component import run
from .models import CachePolicy, MetaTag, RenderBotHtmlInput, RenderBotHtmlOutput

__all__ = [
    # Entry point
    "run",
    # Pure functions
    "build_cache_control",
    "build_meta_tags",
    "escape_html",
    "render_bot_html",
    "render_meta_tags_html",
    "HTML_MEDIA_TYPE",
    # Models
    "CachePolicy",
    "MetaTag",
    "RenderBotHtmlInput",
    "RenderBotHtmlOutput",
]
