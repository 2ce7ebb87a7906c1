from __future__ import annotations

from pathlib import Path
from typing import Union


def write_artifact(data: bytes, path: Union[str, Path]) -> str:
    """
    Write bytes to `path` (parent dirs created) and return a file:// uri.
    The path is always caller-supplied; nothing is resolved relative to this package.
    """
    out = Path(path).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    return out.resolve().as_uri()
