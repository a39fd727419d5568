"""
Unit tests for the Render component.

Tests:
- Open Graph / Twitter Card tag set
- Escaping of untrusted metadata
- Determinism and cache headers
"""

from __future__ import annotations

import re

import pytest

from src.components.metadata import ContentType, Meta
from src.domain.branding import FALLBACK_IMAGE_URL, SITE_NAME

from .._impl import (
    build_cache_control,
    build_meta_tags,
    escape_html,
    render_bot_html,
)
from ..component import run
from ..models import CachePolicy, RenderBotHtmlInput

ORIGIN = "https://press.example.com"

# --- Fixtures ---


@pytest.fixture
def blog_meta() -> Meta:
    return Meta(
        title="Acme News",
        description="Daily briefs",
        image="https://img/acme.png",
        canonical_url=f"{ORIGIN}/blog/acme-news",
        content_type=ContentType.WEBSITE,
        preview_image_url=f"{ORIGIN}/api/og?type=blog&slug=acme-news",
    )


@pytest.fixture
def post_meta() -> Meta:
    return Meta(
        title="Council votes",
        description="Breaking: city council votes unanimously",
        image="https://img/acme.png",
        canonical_url=f"{ORIGIN}/blog/acme-news/post/123",
        content_type=ContentType.ARTICLE,
        preview_image_url=f"{ORIGIN}/api/og?type=post&id=123",
        publisher_name="Acme News",
    )


def _tag_map(meta: Meta) -> dict[str, str]:
    return {(tag.property or tag.name or ""): tag.content for tag in build_meta_tags(meta)}


# --- Tag Set Tests ---


class TestBuildMetaTags:
    def test_open_graph_tags(self, blog_meta: Meta) -> None:
        tags = _tag_map(blog_meta)

        assert tags["og:title"] == "Acme News"
        assert tags["og:description"] == "Daily briefs"
        assert tags["og:image"] == f"{ORIGIN}/api/og?type=blog&slug=acme-news"
        assert tags["og:image:width"] == "1200"
        assert tags["og:image:height"] == "630"
        assert tags["og:url"] == f"{ORIGIN}/blog/acme-news"
        assert tags["og:type"] == "website"
        assert tags["og:site_name"] == SITE_NAME

    def test_twitter_tags(self, blog_meta: Meta) -> None:
        tags = _tag_map(blog_meta)

        assert tags["twitter:card"] == "summary_large_image"
        assert tags["twitter:title"] == "Acme News"
        assert tags["twitter:description"] == "Daily briefs"
        assert tags["twitter:image"] == tags["og:image"]
        assert tags["twitter:site"].startswith("@")

    def test_publisher_tag_only_for_known_publisher(
        self, blog_meta: Meta, post_meta: Meta
    ) -> None:
        assert "article:publisher" not in _tag_map(blog_meta)
        assert _tag_map(post_meta)["article:publisher"] == "Acme News"
        assert _tag_map(post_meta)["og:type"] == "article"

    def test_image_without_preview_url(self) -> None:
        meta = Meta(
            title=SITE_NAME,
            description="x",
            image=FALLBACK_IMAGE_URL,
            canonical_url=f"{ORIGIN}/",
            content_type=ContentType.WEBSITE,
        )

        assert _tag_map(meta)["og:image"] == FALLBACK_IMAGE_URL


# --- Document Tests ---


class TestRenderBotHtml:
    def test_document_structure(self, blog_meta: Meta) -> None:
        html = render_bot_html(blog_meta)

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Acme News</title>" in html
        assert '<meta property="og:title" content="Acme News"' in html
        assert '<meta property="og:type" content="website"' in html
        assert '<meta name="description" content="Daily briefs"' in html

    def test_redirects_to_canonical(self, post_meta: Meta) -> None:
        html = render_bot_html(post_meta)
        url = f"{ORIGIN}/blog/acme-news/post/123"

        assert f'<meta http-equiv="refresh" content="0; url={url}" />' in html
        assert f'<link rel="canonical" href="{url}" />' in html
        assert f'<a href="{url}">Council votes</a>' in html

    def test_query_strings_are_escaped(self, post_meta: Meta) -> None:
        html = render_bot_html(post_meta)

        assert "api/og?type=post&amp;id=123" in html
        assert "api/og?type=post&id=123" not in html

    def test_deterministic(self, post_meta: Meta) -> None:
        assert render_bot_html(post_meta) == render_bot_html(post_meta)

    def test_escaping_is_total(self, post_meta: Meta) -> None:
        hostile = '"><script>alert(1)</script>&<b>'
        benign = Meta(
            title="T",
            description="D",
            image="I",
            canonical_url=f"{ORIGIN}/c",
            content_type=ContentType.ARTICLE,
            preview_image_url=f"{ORIGIN}/p",
            publisher_name="P",
        )
        attacked = Meta(
            title=hostile,
            description=hostile,
            image=hostile,
            canonical_url=f"{ORIGIN}/c{hostile}",
            content_type=ContentType.ARTICLE,
            preview_image_url=f"{ORIGIN}/p{hostile}",
            publisher_name=hostile,
        )

        safe_html = render_bot_html(benign)
        attacked_html = render_bot_html(attacked)

        assert "<script>" not in attacked_html
        for char in ("<", ">", '"'):
            assert attacked_html.count(char) == safe_html.count(char)
        assert re.search(r"&(?!amp;|lt;|gt;|quot;|#x27;|hellip;)", attacked_html) is None


class TestEscapeHtml:
    def test_escapes_all_specials(self) -> None:
        assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#x27;"

    def test_plain_text_unchanged(self) -> None:
        assert escape_html("Acme News") == "Acme News"


# --- Entry Point Tests ---


class TestRun:
    def test_attaches_cache_control(self, blog_meta: Meta) -> None:
        result = run(
            RenderBotHtmlInput(
                meta=blog_meta,
                cache_policy=CachePolicy(s_maxage_seconds=300, stale_while_revalidate_seconds=600),
            )
        )

        assert result.headers["Cache-Control"] == (
            "public, s-maxage=300, stale-while-revalidate=600"
        )
        assert result.media_type == "text/html; charset=utf-8"
        assert "<title>Acme News</title>" in result.html

    def test_no_policy_no_header(self, blog_meta: Meta) -> None:
        assert run(RenderBotHtmlInput(meta=blog_meta)).headers == {}

    def test_build_cache_control(self) -> None:
        policy = CachePolicy(s_maxage_seconds=60, stale_while_revalidate_seconds=120)
        assert build_cache_control(policy) == "public, s-maxage=60, stale-while-revalidate=120"
