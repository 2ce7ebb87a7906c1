from __future__ import annotations

"""
Core helpers shared by the pipeline: hashing and ID generation.
"""

from packshot_compositor.core import hashing, ids

__all__ = [
    "hashing",
    "ids",
]
