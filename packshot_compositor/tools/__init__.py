from __future__ import annotations

"""
Tools package for the packshot compositor.

This package contains the deterministic image tools used by the runner:
- image_ops: decode, resize, placement and layer blending
- exporters: PNG encoding and writing artifacts to disk
"""

from packshot_compositor.tools import image_ops, exporters

__all__ = [
    "image_ops",
    "exporters",
]
