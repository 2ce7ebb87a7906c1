from __future__ import annotations

import io
import logging

from PIL import Image, UnidentifiedImageError

from packshot_compositor.app.errors import ImageDecodeError

logger = logging.getLogger(__name__)


def decode_image(data: bytes, *, role: str = "image") -> Image.Image:
    """
    Decode an encoded raster buffer (png, jpeg, webp, ...) into an RGBA image.
    role is only used in error messages / logs ("background", "overlay").
    """
    try:
        with Image.open(io.BytesIO(data)) as im:
            im.load()
            src_mode = im.mode
            rgba = im.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        # Pillow reports corrupt chunks as SyntaxError and oversized images as DecompressionBombError
        raise ImageDecodeError(f"Could not decode {role} image ({len(data)} bytes): {e}") from e

    logger.debug(
        "decoded %s image %sx%s (mode %s)",
        role,
        rgba.width,
        rgba.height,
        src_mode,
        extra={"ctx": {"role": role, "bytes": len(data)}},
    )
    return rgba
