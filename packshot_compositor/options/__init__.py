from __future__ import annotations

from packshot_compositor.options.builder import build_request, request_from_options
from packshot_compositor.options.schemas import (
    BuildCompositedImageOptions,
    CenterOffset,
    CompositeResult,
    CompositingRequest,
    HeightResize,
    OffsetMode,
    PercentOffset,
    PixelOffset,
    ResizeMode,
    ScaleResize,
    WidthResize,
)

__all__ = [
    "build_request",
    "request_from_options",
    "BuildCompositedImageOptions",
    "CenterOffset",
    "CompositeResult",
    "CompositingRequest",
    "HeightResize",
    "OffsetMode",
    "PercentOffset",
    "PixelOffset",
    "ResizeMode",
    "ScaleResize",
    "WidthResize",
]
