"""
Metadata component - Canonical preview metadata for blogs and posts.
"""

from ._impl import (
    PREVIEW_IMAGE_PATH,
    canonical_url_for,
    fallback_meta,
    intent_from_query,
    is_valid_identifier,
    normalize_origin,
    parse_route_intent,
    preview_image_url_for,
    strip_html,
    truncate,
)
from .component import resolve, run
from .models import (
    UNKNOWN_INTENT,
    ContentType,
    Meta,
    ResolveInput,
    ResolveOutput,
    RouteIntent,
    RouteKind,
)
from .ports import SummaryRepoPort

__all__ = [
    # Entry points
    "run",
    "resolve",
    # Route intents
    "parse_route_intent",
    "intent_from_query",
    "is_valid_identifier",
    # URLs
    "PREVIEW_IMAGE_PATH",
    "canonical_url_for",
    "normalize_origin",
    "preview_image_url_for",
    # Text
    "strip_html",
    "truncate",
    "fallback_meta",
    # Models
    "UNKNOWN_INTENT",
    "ContentType",
    "Meta",
    "ResolveInput",
    "ResolveOutput",
    "RouteIntent",
    "RouteKind",
    # Ports
    "SummaryRepoPort",
]
