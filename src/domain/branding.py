"""Compiled-in branding, text bounds and preview geometry."""

SITE_NAME = "Press Room Publisher"
SITE_TAGLINE = "Your trusted source for news and stories"
TWITTER_HANDLE = "@PressRoomPub"

FALLBACK_IMAGE_URL = (
    "https://pressroompublisher.broadcasterscommunity.com/wp-content/uploads/"
    "2026/01/cropped-PRP-ICON_-transparetn-32x32.png"
)
LOGO_URL = FALLBACK_IMAGE_URL

GENERIC_POST_DESCRIPTION = "Read this article on Press Room Publisher."
GENERIC_BLOG_DESCRIPTION = "A publication on Press Room Publisher."

# --- Text bounds (code points, ellipsis included) ---

TITLE_MAX = 72
HTML_DESCRIPTION_MAX = 160
IMAGE_DESCRIPTION_MAX = 130
PUBLISHER_LABEL_MAX = 40

ELLIPSIS = "…"

# --- Preview image geometry ---

PREVIEW_WIDTH = 1200
PREVIEW_HEIGHT = 630
