from __future__ import annotations

"""
Packshot compositor: place a product image on a colored canvas and blend an
overlay on top of it.

    from packshot_compositor import build_composited_image

    result = build_composited_image(product_png, overlay_png, {
        "backgroundColor": [0, 0, 255, 255],
        "resizeMode": {"type": "Scale", "value": 1},
        "offsetMode": {"type": "Percent", "value": [50, 50]},
    })
"""

from packshot_compositor.api_stub.runner import (
    build_composited_image,
    build_composited_image_from_paths,
    composite_request,
)
from packshot_compositor.app.errors import (
    AppError,
    ConfigError,
    ImageDecodeError,
    InvalidConfiguration,
    ToolInvocationError,
)
from packshot_compositor.options import (
    BuildCompositedImageOptions,
    CompositeResult,
    CompositingRequest,
    build_request,
)

__all__ = [
    "build_composited_image",
    "build_composited_image_from_paths",
    "composite_request",
    "build_request",
    "BuildCompositedImageOptions",
    "CompositeResult",
    "CompositingRequest",
    "AppError",
    "ConfigError",
    "ImageDecodeError",
    "InvalidConfiguration",
    "ToolInvocationError",
]
