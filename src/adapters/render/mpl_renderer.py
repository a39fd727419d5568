import textwrap
from io import BytesIO

import matplotlib.figure
import numpy as np
from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.colors import to_rgb
from matplotlib.patches import FancyBboxPatch
from PIL import Image, ImageOps

from src.components.preview import PreviewAssets, PreviewCard

# Palette
BACKGROUND_STOPS = ((0.0, "#0d0d1a"), (0.6, "#1a1a2e"), (1.0, "#0d1117"))
ACCENT_STOPS = ((0.0, "#6366f1"), (0.5, "#8b5cf6"), (1.0, "#06b6d4"))
LABEL_BAR_STOPS = ((0.0, "#6366f1"), (1.0, "#8b5cf6"))
GLOW_RGB = (99 / 255, 102 / 255, 241 / 255)
TITLE_COLOR = "#f1f5f9"
MUTED_COLOR = "#94a3b8"
LABEL_COLOR = "#a78bfa"

# Layout, in pixels
PADDING_X = 64
PADDING_Y = 56
LOGO_SIZE = 36
HEADER_GAP = 44
PHOTO_SIZE = 210
COLUMN_GAP = 48
ACCENT_HEIGHT = 4
ACCENT_GAP = 40
TITLE_PX = 52
SUBTITLE_PX = 21
LABEL_PX = 16
WORDMARK_PX = 15
MAX_SOURCE_PIXELS = 40_000_000

Stops = tuple[tuple[float, str], ...]


def _gradient(t: np.ndarray, stops: Stops) -> np.ndarray:
    """Map positions in [0, 1] to RGB through linear colour stops."""
    positions = [p for p, _ in stops]
    colors = np.array([to_rgb(c) for _, c in stops])
    return np.stack([np.interp(t, positions, colors[:, i]) for i in range(3)], axis=-1)


def _decode_square(data: bytes, size: int) -> np.ndarray:
    """
    Decode image bytes (any format Pillow reads) into a size x size RGBA array.

    Centre-cropped like object-fit: cover. Sources above MAX_SOURCE_PIXELS are
    refused before their pixels are decoded.

    Raises:
        PIL.UnidentifiedImageError: If the bytes are not a readable image.
        ValueError: If the image is empty or too large.
    """
    with Image.open(BytesIO(data)) as image:
        width, height = image.size
        if width < 1 or height < 1:
            raise ValueError("Image has no pixels")
        if width * height > MAX_SOURCE_PIXELS:
            raise ValueError(f"Image too large to decode: {width}x{height}")

        image.draft("RGB", (size, size))  # JPEG: decode at reduced scale
        oriented = ImageOps.exif_transpose(image).convert("RGBA")

    square = ImageOps.fit(oriented, (size, size), method=Image.Resampling.LANCZOS)
    return np.asarray(square)


class MatplotlibPreviewRenderer:
    def __init__(self, dpi: int = 100):
        self.dpi = dpi

    def _pt(self, px: float) -> float:
        return px * 72 / self.dpi

    def render(self, card: PreviewCard, assets: PreviewAssets) -> bytes:
        """
        Compose the preview card into a PNG of exactly card.width x card.height.

        Axes use pixel coordinates with the origin at the top-left.
        """
        w, h = card.width, card.height
        fig = matplotlib.figure.Figure(figsize=(w / self.dpi, h / self.dpi), dpi=self.dpi)
        FigureCanvasAgg(fig)  # Attach canvas backend
        fig.patch.set_facecolor(BACKGROUND_STOPS[0][1])
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_axis_off()

        self._draw_background(ax, w, h)
        self._draw_header(ax, card, assets.logo)

        photo = _decode_square(assets.photo, PHOTO_SIZE) if assets.photo else None
        text_right = w - PADDING_X
        if photo is not None:
            text_right -= PHOTO_SIZE + COLUMN_GAP

        row_top = PADDING_Y + LOGO_SIZE + HEADER_GAP
        row_bottom = h - PADDING_Y - ACCENT_HEIGHT - ACCENT_GAP
        self._draw_text_column(ax, card, PADDING_X, text_right, row_top, row_bottom)

        if photo is not None:
            photo_top = (row_top + row_bottom) / 2 - PHOTO_SIZE / 2
            self._draw_photo(ax, photo, w - PADDING_X - PHOTO_SIZE, photo_top)

        self._draw_gradient_box(
            ax,
            PADDING_X,
            h - PADDING_Y - ACCENT_HEIGHT,
            w - 2 * PADDING_X,
            ACCENT_HEIGHT,
            ACCENT_STOPS,
            radius=2,
        )

        # imshow autoscales; pin the pixel coordinate system last
        ax.set_xlim(0, w)
        ax.set_ylim(h, 0)

        buf = BytesIO()
        fig.savefig(buf, format="png", dpi=self.dpi)
        png_data = buf.getvalue()
        buf.close()
        return png_data

    # --- Layers ---

    def _draw_background(self, ax: Axes, w: int, h: int) -> None:
        # 135deg diagonal gradient, rendered coarse and smoothed by interpolation
        gy, gx = np.mgrid[0 : h // 10, 0 : w // 10]
        t = (gx / max(gx.max(), 1) + gy / max(gy.max(), 1)) / 2
        ax.imshow(
            _gradient(t, BACKGROUND_STOPS),
            extent=(0, w, h, 0),
            aspect="auto",
            interpolation="bilinear",
            zorder=0,
        )

        # Radial glow bleeding off the top-right corner
        radius = 200
        cx, cy = w + 80 - radius, -80 + radius
        x0, x1 = max(cx - radius, 0), w
        y0, y1 = 0, min(cy + radius, h)
        yy, xx = np.mgrid[y0:y1, x0:x1]
        distance = np.hypot(xx - cx, yy - cy) / radius
        glow = np.zeros((y1 - y0, x1 - x0, 4))
        glow[..., :3] = GLOW_RGB
        glow[..., 3] = np.clip(1 - distance / 0.7, 0, 1) * 0.15
        ax.imshow(glow, extent=(x0, x1, y1, y0), aspect="auto", zorder=1)

    def _draw_header(self, ax: Axes, card: PreviewCard, logo_bytes: bytes | None) -> None:
        text_x = PADDING_X
        if logo_bytes:
            logo = _decode_square(logo_bytes, LOGO_SIZE)
            image = ax.imshow(
                logo,
                extent=(PADDING_X, PADDING_X + LOGO_SIZE, PADDING_Y + LOGO_SIZE, PADDING_Y),
                aspect="auto",
                zorder=3,
            )
            image.set_clip_path(self._rounded(ax, PADDING_X, PADDING_Y, LOGO_SIZE, LOGO_SIZE, 8))
            text_x += LOGO_SIZE + 12

        ax.text(
            text_x,
            PADDING_Y + LOGO_SIZE / 2,
            card.wordmark.upper(),
            color=MUTED_COLOR,
            fontsize=self._pt(WORDMARK_PX),
            family="sans-serif",
            va="center",
            ha="left",
            parse_math=False,
            zorder=3,
        )

    def _draw_text_column(
        self,
        ax: Axes,
        card: PreviewCard,
        left: float,
        right: float,
        top: float,
        bottom: float,
    ) -> None:
        width = right - left
        title_lines = textwrap.wrap(card.title, width=max(int(width / (TITLE_PX * 0.55)), 10))
        subtitle_lines = textwrap.wrap(
            card.subtitle, width=max(int(width / (SUBTITLE_PX * 0.5)), 10)
        )

        label_height = 20 + 18 if card.label else 0
        title_height = len(title_lines) * TITLE_PX * 1.15
        subtitle_height = len(subtitle_lines) * SUBTITLE_PX * 1.55
        block = label_height + title_height + (20 + subtitle_height if subtitle_lines else 0)
        y = top + max((bottom - top - block) / 2, 0)

        if card.label:
            self._draw_gradient_box(ax, left, y, 4, 20, LABEL_BAR_STOPS, radius=2, vertical=True)
            ax.text(
                left + 14,
                y + 10,
                card.label.upper(),
                color=LABEL_COLOR,
                fontsize=self._pt(LABEL_PX),
                family="sans-serif",
                va="center",
                ha="left",
                parse_math=False,
                zorder=3,
            )
            y += label_height

        ax.text(
            left,
            y,
            "\n".join(title_lines),
            color=TITLE_COLOR,
            fontsize=self._pt(TITLE_PX),
            fontweight="bold",
            family="serif",
            linespacing=1.15,
            va="top",
            ha="left",
            parse_math=False,
            zorder=3,
        )
        y += title_height + 20

        if subtitle_lines:
            ax.text(
                left,
                y,
                "\n".join(subtitle_lines),
                color=MUTED_COLOR,
                fontsize=self._pt(SUBTITLE_PX),
                family="sans-serif",
                linespacing=1.55,
                va="top",
                ha="left",
                parse_math=False,
                zorder=3,
            )

    def _draw_photo(self, ax: Axes, photo: np.ndarray, x: float, y: float) -> None:
        # Soft glow: widening translucent outlines
        for step in range(1, 9):
            pad = step * 4
            ax.add_patch(
                FancyBboxPatch(
                    (x - pad, y - pad),
                    PHOTO_SIZE + 2 * pad,
                    PHOTO_SIZE + 2 * pad,
                    boxstyle=f"round,pad=0,rounding_size={20 + pad}",
                    facecolor="none",
                    edgecolor=(*GLOW_RGB, 0.25 * (1 - step / 9) / 2),
                    linewidth=self._pt(4),
                    zorder=2,
                )
            )

        image = ax.imshow(
            photo,
            extent=(x, x + PHOTO_SIZE, y + PHOTO_SIZE, y),
            aspect="auto",
            interpolation="antialiased",
            zorder=3,
        )
        image.set_clip_path(self._rounded(ax, x, y, PHOTO_SIZE, PHOTO_SIZE, 20))

        ax.add_patch(
            FancyBboxPatch(
                (x, y),
                PHOTO_SIZE,
                PHOTO_SIZE,
                boxstyle="round,pad=0,rounding_size=20",
                facecolor="none",
                edgecolor=(*GLOW_RGB, 0.4),
                linewidth=self._pt(3),
                zorder=4,
            )
        )

    def _draw_gradient_box(
        self,
        ax: Axes,
        x: float,
        y: float,
        width: float,
        height: float,
        stops: Stops,
        radius: float = 0,
        vertical: bool = False,
    ) -> None:
        steps = np.linspace(0, 1, 64)
        t = steps[:, np.newaxis] if vertical else steps[np.newaxis, :]
        image = ax.imshow(
            _gradient(t, stops),
            extent=(x, x + width, y + height, y),
            aspect="auto",
            interpolation="bilinear",
            zorder=3,
        )
        image.set_clip_path(self._rounded(ax, x, y, width, height, radius))

    def _rounded(
        self, ax: Axes, x: float, y: float, width: float, height: float, radius: float
    ) -> FancyBboxPatch:
        return FancyBboxPatch(
            (x, y),
            width,
            height,
            boxstyle=f"round,pad=0,rounding_size={radius}",
            transform=ax.transData,
            facecolor="none",
            edgecolor="none",
        )
