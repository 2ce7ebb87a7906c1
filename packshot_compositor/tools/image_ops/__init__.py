from __future__ import annotations

from packshot_compositor.tools.image_ops import decode, resize, compose_layers

__all__ = [
    "decode",
    "resize",
    "compose_layers",
]
