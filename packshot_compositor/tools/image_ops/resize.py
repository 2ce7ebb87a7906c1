from __future__ import annotations

import logging
from typing import Dict, Tuple

from PIL import Image

from packshot_compositor.app.errors import ConfigError, ToolInvocationError
from packshot_compositor.options.schemas import (
    MAX_DIMENSION,
    HeightResize,
    ResizeMode,
    ScaleResize,
    WidthResize,
)

logger = logging.getLogger(__name__)

RESAMPLE_FILTERS: Dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def target_size(size: Tuple[int, int], mode: ResizeMode) -> Tuple[int, int]:
    """
    Width(w):  (w, trunc(w * h0 / w0))
    Height(h): (trunc(h * w0 / h0), h)
    Scale(f):  (trunc(w0 * f), trunc(h0 * f))
    Dimensions never drop below 1px; either side above MAX_DIMENSION raises ToolInvocationError.
    """
    w0, h0 = size

    if isinstance(mode, WidthResize):
        fw, fh = float(mode.value), mode.value * (h0 / w0)
    elif isinstance(mode, HeightResize):
        fw, fh = mode.value * (w0 / h0), float(mode.value)
    elif isinstance(mode, ScaleResize):
        fw, fh = w0 * mode.value, h0 * mode.value
    else:
        raise TypeError(f"Unsupported resize mode: {mode!r}")

    # checked on the float so an oversized target never reaches int() or the allocator
    if fw > MAX_DIMENSION or fh > MAX_DIMENSION:
        raise ToolInvocationError(
            f"{mode.type} resize of a {w0}x{h0} image gives {fw:.0f}x{fh:.0f}, "
            f"above the {MAX_DIMENSION}px limit"
        )

    return max(int(fw), 1), max(int(fh), 1)


def resize_image(
    image: Image.Image,
    mode: ResizeMode,
    *,
    resample: str = "lanczos",
) -> Image.Image:
    """Exact resize to target_size(); returns the input unchanged when the size already matches."""
    if resample not in RESAMPLE_FILTERS:
        raise ConfigError(f"Unknown resample filter {resample!r}, expected one of {', '.join(RESAMPLE_FILTERS)}")

    size = target_size(image.size, mode)
    if size == image.size:
        return image

    logger.debug(
        "resizing %sx%s -> %sx%s",
        image.width,
        image.height,
        size[0],
        size[1],
        extra={"ctx": {"mode": mode.model_dump(), "resample": resample}},
    )
    return image.resize(size, RESAMPLE_FILTERS[resample])
