"""
Tests for the bot-aware share route.

Scenarios:
- Bot on a blog link gets synthesized HTML with Open Graph tags
- Human on a post link gets the SPA shell unchanged
- Bot on a missing post still gets HTTP 200 with generic metadata
- Unknown /blog routes and shell failures
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.clock import SystemClock
from src.api.deps import get_rules, get_shell_cache, get_summary_repo
from src.api.routes import share
from src.components.shell import ShellCache
from src.domain.branding import GENERIC_POST_DESCRIPTION, SITE_NAME
from src.ports.datastore import DataStoreUnavailableError
from tests.conftest import FakeFetcher, FakeSummaryRepo

SHELL_HTML = '<!doctype html><html><body><div id="root"></div></body></html>'
SHELL_URL = "http://testserver/index.html"

FACEBOOK_UA = "facebookexternalhit/1.1 (+http://www.facebook.com/externalhit_uatext.php)"
BROWSER_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
)


@pytest.fixture
def repo(blog, post) -> FakeSummaryRepo:
    return FakeSummaryRepo(posts={"42": post}, blogs={"acme": blog})


@pytest.fixture
def shell_fetcher() -> FakeFetcher:
    return FakeFetcher({SHELL_URL: SHELL_HTML.encode("utf-8")})


@pytest.fixture
def app(rules, repo, shell_fetcher) -> FastAPI:
    """Test FastAPI app with share routes and in-memory collaborators."""
    app = FastAPI()
    app.include_router(share.router)

    shell = ShellCache(shell_fetcher, SystemClock())
    app.dependency_overrides[get_rules] = lambda: rules
    app.dependency_overrides[get_summary_repo] = lambda: repo
    app.dependency_overrides[get_shell_cache] = lambda: shell
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


class TestBotRequests:
    def test_blog_link_gets_open_graph_html(self, client: TestClient) -> None:
        r = client.get("/blog/acme", headers={"User-Agent": FACEBOOK_UA})

        assert r.status_code == 200
        assert r.headers["content-type"] == "text/html; charset=utf-8"
        assert r.headers["cache-control"] == "public, s-maxage=300, stale-while-revalidate=60"
        assert '<meta property="og:title" content="Acme Weekly" />' in r.text
        assert '<meta property="og:type" content="website" />' in r.text
        assert '<meta property="og:url" content="http://testserver/blog/acme" />' in r.text
        og_image = "http://testserver/api/og?type=blog&amp;slug=acme"
        assert f'<meta property="og:image" content="{og_image}" />' in r.text
        # Untrusted blog description is escaped
        assert "News &amp; notes from &lt;Acme&gt;" in r.text
        assert "<Acme>" not in r.text

    def test_post_link_gets_article_html(self, client: TestClient) -> None:
        r = client.get("/blog/acme/post/42", headers={"User-Agent": "Twitterbot/1.0"})

        assert r.status_code == 200
        assert '<meta property="og:type" content="article" />' in r.text
        assert '<meta property="og:description" content="Hello &amp; welcome" />' in r.text
        assert '<meta property="article:publisher" content="Acme Weekly" />' in r.text
        assert '<link rel="canonical" href="http://testserver/blog/acme/post/42" />' in r.text

    def test_missing_post_gets_generic_html(self, client: TestClient) -> None:
        r = client.get("/blog/acme/post/999", headers={"User-Agent": FACEBOOK_UA})

        assert r.status_code == 200
        assert f"<title>{SITE_NAME}</title>" in r.text
        assert f'content="{GENERIC_POST_DESCRIPTION}"' in r.text
        assert '<meta property="og:type" content="website" />' in r.text
        assert '<meta property="og:url" content="http://testserver/blog/acme/post/999" />' in r.text

    def test_data_store_outage_gets_generic_html(self, client: TestClient, repo) -> None:
        repo.error = DataStoreUnavailableError("timed out")
        r = client.get("/blog/acme", headers={"User-Agent": FACEBOOK_UA})

        assert r.status_code == 200
        assert f"<title>{SITE_NAME}</title>" in r.text

    def test_output_is_deterministic(self, client: TestClient) -> None:
        first = client.get("/blog/acme/post/42", headers={"User-Agent": FACEBOOK_UA})
        second = client.get("/blog/acme/post/42", headers={"User-Agent": FACEBOOK_UA})
        assert first.text == second.text

    def test_unknown_blog_route_serves_shell(self, client: TestClient, repo) -> None:
        r = client.get("/blog/", headers={"User-Agent": FACEBOOK_UA})

        assert r.status_code == 200
        assert r.text == SHELL_HTML
        assert repo.calls == []

    def test_path_is_decoded_exactly_once(self, client: TestClient, repo) -> None:
        r = client.get("/blog/%61cme", headers={"User-Agent": FACEBOOK_UA})

        assert '<meta property="og:title" content="Acme Weekly" />' in r.text
        assert repo.calls == [("blog", "acme")]

    def test_double_encoded_path_is_not_decoded_twice(self, client: TestClient, repo) -> None:
        r = client.get("/blog/%2561cme", headers={"User-Agent": FACEBOOK_UA})

        assert r.text == SHELL_HTML
        assert repo.calls == []

    def test_invalid_identifier_never_queries(self, client: TestClient, repo) -> None:
        r = client.get("/blog/acme/post/1,2", headers={"User-Agent": FACEBOOK_UA})

        assert r.text == SHELL_HTML
        assert repo.calls == []


class TestHumanRequests:
    def test_post_link_gets_shell_unchanged(self, client: TestClient, repo) -> None:
        r = client.get("/blog/acme/post/42", headers={"User-Agent": BROWSER_UA})

        assert r.status_code == 200
        assert r.text == SHELL_HTML
        assert r.headers["cache-control"] == "public, max-age=0, must-revalidate"
        assert repo.calls == []

    def test_missing_user_agent_is_human(self, client: TestClient) -> None:
        r = client.get("/blog/acme", headers={"User-Agent": ""})
        assert r.text == SHELL_HTML

    def test_shell_is_fetched_once(self, client: TestClient, shell_fetcher) -> None:
        client.get("/blog/acme", headers={"User-Agent": BROWSER_UA})
        client.get("/blog/other", headers={"User-Agent": BROWSER_UA})
        assert shell_fetcher.requested == [SHELL_URL]

    def test_shell_fetch_failure_is_bad_gateway(self, client: TestClient, shell_fetcher) -> None:
        shell_fetcher.responses.clear()
        r = client.get("/blog/acme", headers={"User-Agent": BROWSER_UA})

        assert r.status_code == 502
        assert r.headers["content-type"].startswith("text/plain")
