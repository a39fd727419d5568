"""
Preview component - Rendered social preview images.
"""

from .component import build_preview_card, render_preview_image, run
from .models import (
    PreviewAssets,
    PreviewCard,
    PreviewImage,
    PreviewRenderError,
    RenderPreviewInput,
)
from .ports import ImageFetcherPort, PreviewRendererPort

__all__ = [
    # Entry points
    "run",
    "render_preview_image",
    # Pure functions
    "build_preview_card",
    # Models
    "PreviewAssets",
    "PreviewCard",
    "PreviewImage",
    "PreviewRenderError",
    "RenderPreviewInput",
    # Ports
    "ImageFetcherPort",
    "PreviewRendererPort",
]
