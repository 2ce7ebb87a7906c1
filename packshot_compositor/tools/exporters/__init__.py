from __future__ import annotations

from packshot_compositor.tools.exporters import encode_png, write_artifact

__all__ = [
    "encode_png",
    "write_artifact",
]
