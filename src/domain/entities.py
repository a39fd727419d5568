from typing import Literal

from pydantic import BaseModel, Field

# --- Enums / Literals ---
BlogStatus = Literal["active", "hidden", "deleted"]
PostStatus = Literal["draft", "published", "hidden", "deleted"]

# --- Read-only projections ---


class PostSummary(BaseModel):
    """Published post joined with the blog that owns it."""

    headline: str | None = None
    subtitle: str | None = None
    content: str = ""
    publisher_name: str | None = None
    publisher_image: str | None = None
    publisher_slug: str | None = None


class BlogSummary(BaseModel):
    name: str
    description: str | None = None
    profile_image: str | None = None
    follower_count: int = Field(default=0, ge=0)
    slug: str | None = None
