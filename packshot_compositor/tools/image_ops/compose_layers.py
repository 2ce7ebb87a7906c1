from __future__ import annotations

from typing import Tuple

from PIL import Image

from packshot_compositor.options.schemas import CenterOffset, OffsetMode, PercentOffset, PixelOffset

Size = Tuple[int, int]


def _pin(v: float, lo: int, hi: int) -> float:
    return min(max(v, lo), hi)


def calculate_position(mode: OffsetMode, extra_size: Size, base_size: Size) -> Tuple[int, int]:
    """
    Top-left corner for an image of extra_size placed on a canvas of base_size.

    Pixel / Percent treat the offset as the image center; Center keeps the
    image inside the canvas when it fits and pins it to (0, 0) when it doesn't.
    Percent positions are pinned to [-extra, base]: anything past that is fully
    clipped anyway, and huge percentages would otherwise overflow int().
    """
    ew, eh = extra_size
    bw, bh = base_size

    if isinstance(mode, PixelOffset):
        x, y = mode.value
        return x - ew // 2, y - eh // 2

    if isinstance(mode, PercentOffset):
        px, py = mode.value
        # int() truncates toward zero
        x = _pin(bw * px / 100.0 - ew / 2.0, -ew, bw)
        y = _pin(bh * py / 100.0 - eh / 2.0, -eh, bh)
        return int(x), int(y)

    if isinstance(mode, CenterOffset):
        return max(bw - ew, 0) // 2, max(bh - eh, 0) // 2

    raise TypeError(f"Unsupported offset mode: {mode!r}")


def overlay_image(canvas: Image.Image, top: Image.Image, x: int, y: int) -> None:
    """
    Alpha-blend `top` over `canvas` in place with its top-left at (x, y).
    Offsets may be negative or past the canvas; only the overlapping part is drawn.
    Both images are expected in RGBA.
    """
    cw, ch = canvas.size
    tw, th = top.size

    # clip to canvas
    dx0, dy0 = max(x, 0), max(y, 0)
    dx1, dy1 = min(x + tw, cw), min(y + th, ch)
    if dx1 <= dx0 or dy1 <= dy0:
        return

    sx0, sy0 = dx0 - x, dy0 - y
    canvas.alpha_composite(
        top,
        dest=(dx0, dy0),
        source=(sx0, sy0, sx0 + (dx1 - dx0), sy0 + (dy1 - dy0)),
    )


def compose(
    canvas: Image.Image,
    product: Image.Image,
    overlay: Image.Image,
    offset: OffsetMode,
) -> Tuple[int, int]:
    """
    Layer order (bottom -> top): canvas fill, product at `offset`, overlay centered.
    Returns the product's top-left position.
    """
    base_size = canvas.size

    product_xy = calculate_position(offset, product.size, base_size)
    overlay_image(canvas, product, *product_xy)

    overlay_xy = calculate_position(CenterOffset(), overlay.size, base_size)
    overlay_image(canvas, overlay, *overlay_xy)

    return product_xy


def new_canvas(size: Size, color: Tuple[int, int, int, int]) -> Image.Image:
    return Image.new("RGBA", size, tuple(color))
