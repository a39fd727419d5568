"""
Metadata component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import BlogSummary, PostSummary


class SummaryRepoPort(Protocol):
    """Read-only access to the blog/post projections the resolver needs."""

    async def get_published_post(self, post_id: str) -> PostSummary | None:
        """Published post with its owning blog, or None if absent."""
        ...

    async def get_active_blog(self, slug: str) -> BlogSummary | None:
        """Active blog by slug, or None if absent."""
        ...
