from __future__ import annotations

from packshot_compositor.api_stub.runner import (
    build_composited_image,
    build_composited_image_from_paths,
    composite_request,
    run_from_env,
)

__all__ = [
    "build_composited_image",
    "build_composited_image_from_paths",
    "composite_request",
    "run_from_env",
]
