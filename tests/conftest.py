from pathlib import Path

import pytest

from src.domain.entities import BlogSummary, PostSummary
from src.ports.fetcher import FetchError
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


class FakeSummaryRepo:
    """In-memory SummaryRepoPort."""

    def __init__(
        self,
        posts: dict[str, PostSummary] | None = None,
        blogs: dict[str, BlogSummary] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.posts = posts or {}
        self.blogs = blogs or {}
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def get_published_post(self, post_id: str) -> PostSummary | None:
        self.calls.append(("post", post_id))
        if self.error:
            raise self.error
        return self.posts.get(post_id)

    async def get_active_blog(self, slug: str) -> BlogSummary | None:
        self.calls.append(("blog", slug))
        if self.error:
            raise self.error
        return self.blogs.get(slug)


class FakeFetcher:
    """Fetcher serving canned bodies by URL; unknown URLs raise FetchError."""

    def __init__(self, responses: dict[str, bytes] | None = None) -> None:
        self.responses = responses or {}
        self.requested: list[str] = []

    async def fetch_bytes(self, url: str) -> bytes:
        self.requested.append(url)
        if url not in self.responses:
            raise FetchError(url, "HTTP 404")
        return self.responses[url]

    async def fetch_text(self, url: str) -> str:
        return (await self.fetch_bytes(url)).decode("utf-8")


@pytest.fixture
def rules() -> Rules:
    """The project's real rules.yaml."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def blog() -> BlogSummary:
    return BlogSummary(
        name="Acme Weekly",
        description="News & notes from <Acme>",
        profile_image="https://cdn.example.com/acme.png",
        follower_count=12,
        slug="acme",
    )


@pytest.fixture
def post() -> PostSummary:
    return PostSummary(
        headline="Launch Day",
        subtitle=None,
        content="<p>Hello &amp; welcome</p>",
        publisher_name="Acme Weekly",
        publisher_image="https://cdn.example.com/acme.png",
        publisher_slug="acme",
    )
