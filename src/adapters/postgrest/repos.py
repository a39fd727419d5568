from pydantic import BaseModel, ValidationError

from src.domain.entities import BlogStatus, BlogSummary, PostStatus, PostSummary
from src.ports.datastore import DataStorePort, DataStoreResponseError

PUBLISHED: PostStatus = "published"
ACTIVE: BlogStatus = "active"

# Explicit projections only; never select *.
POST_COLUMNS = "headline,subtitle,content,blogs!inner(blog_name,slug,profile_photo_url,status)"
BLOG_COLUMNS = "blog_name,description,profile_photo_url,follower_count,slug"


# Row shapes as returned by the REST endpoint
class _EmbeddedBlogRow(BaseModel):
    blog_name: str | None = None
    slug: str | None = None
    profile_photo_url: str | None = None


class PostRow(BaseModel):
    headline: str | None = None
    subtitle: str | None = None
    content: str | None = None
    blogs: _EmbeddedBlogRow | None = None


class BlogRow(BaseModel):
    blog_name: str
    description: str | None = None
    profile_photo_url: str | None = None
    follower_count: int | None = None
    slug: str | None = None


class PostgrestSummaryRepo:
    def __init__(self, store: DataStorePort):
        self.store = store

    async def get_published_post(self, post_id: str) -> PostSummary | None:
        rows = await self.store.select(
            "posts",
            columns=POST_COLUMNS,
            filters={"id": post_id, "status": PUBLISHED, "blogs.status": ACTIVE},
            limit=1,
        )
        if not rows:
            return None

        try:
            row = PostRow.model_validate(rows[0])
        except ValidationError as e:
            raise DataStoreResponseError(f"posts: malformed row for {post_id}") from e

        blog = row.blogs or _EmbeddedBlogRow()
        return PostSummary(
            headline=row.headline,
            subtitle=row.subtitle,
            content=row.content or "",
            publisher_name=blog.blog_name,
            publisher_image=blog.profile_photo_url,
            publisher_slug=blog.slug,
        )

    async def get_active_blog(self, slug: str) -> BlogSummary | None:
        rows = await self.store.select(
            "blogs",
            columns=BLOG_COLUMNS,
            filters={"slug": slug, "status": ACTIVE},
            limit=1,
        )
        if not rows:
            return None

        try:
            row = BlogRow.model_validate(rows[0])
        except ValidationError as e:
            raise DataStoreResponseError(f"blogs: malformed row for {slug!r}") from e

        return BlogSummary(
            name=row.blog_name,
            description=row.description,
            profile_image=row.profile_photo_url,
            follower_count=max(row.follower_count or 0, 0),
            slug=row.slug,
        )
