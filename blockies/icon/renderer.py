"""Render IconData to PIL Images.

Each cell becomes a scale x scale block: background for 0, color for 1,
spot color for 2. Rendering is a palette lookup on the cell grid followed
by nearest-neighbour upscaling, so there is no anti-aliasing at block
edges.
"""

from __future__ import annotations

import numpy as np
from PIL import Image

from blockies.icon.colors import palette_array
from blockies.icon.generator import IconData, check_scale


def render_cells(icon: IconData) -> np.ndarray:
    """Render an icon at one pixel per cell: (size, size, 3) uint8."""
    palette = palette_array(icon.bgcolor, icon.color, icon.spotcolor)
    palette = np.round(palette * 255).astype(np.uint8)
    return palette[icon.grid()]


def render_icon(icon: IconData, scale: int | None = None) -> Image.Image:
    """Render an icon directly to a PIL Image of side size * scale."""
    scale = check_scale(icon.scale if scale is None else scale)
    img = Image.fromarray(render_cells(icon))
    if scale > 1:
        img = img.resize((icon.size * scale, icon.size * scale), Image.Resampling.NEAREST)
    return img


def render_icon_sheet(
    icons: list[IconData],
    cols: int = 5,
    padding: int = 4,
    scale: int | None = None,
) -> Image.Image:
    """Render several icons side by side, row-major, on a dark backdrop.

    Cells are sized for the largest icon; smaller ones sit top-left.
    """
    if not icons:
        raise ValueError("no icons to render")
    if cols < 1:
        raise ValueError(f"cols must be >= 1, got {cols}")

    images = [render_icon(icon, scale) for icon in icons]
    n = len(images)
    cols = min(cols, n)
    rows = (n + cols - 1) // cols

    cell = max(img.width for img in images) + padding
    sheet_w = cols * cell + padding
    sheet_h = rows * cell + padding

    sheet = Image.new("RGB", (sheet_w, sheet_h), color=(40, 40, 40))

    for i, img in enumerate(images):
        row, col = divmod(i, cols)
        x = padding + col * cell
        y = padding + row * cell
        sheet.paste(img, (x, y))

    return sheet
