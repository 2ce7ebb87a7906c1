from __future__ import annotations

import io

from PIL import Image

from packshot_compositor.app.errors import ToolInvocationError

PNG_MIME = "image/png"


def encode_png(image: Image.Image) -> bytes:
    """Encode an RGBA canvas as PNG bytes."""
    buf = io.BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise ToolInvocationError(f"PNG encoding failed: {e}") from e
    return buf.getvalue()
