from __future__ import annotations

import io
from typing import Callable, Tuple

import pytest
from PIL import Image


def encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def make_png() -> Callable[..., bytes]:
    def _make(size: Tuple[int, int], color: Tuple[int, ...]) -> bytes:
        mode = "RGBA" if len(color) == 4 else "RGB"
        return encode(Image.new(mode, size, color))

    return _make


@pytest.fixture
def product_png(make_png) -> bytes:
    # opaque red 4x4
    return make_png((4, 4), (255, 0, 0, 255))


@pytest.fixture
def overlay_png(make_png) -> bytes:
    # fully transparent 10x10, so the canvas and product stay visible
    return make_png((10, 10), (0, 0, 0, 0))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("COMPOSITOR_LOG_LEVEL", "COMPOSITOR_RESAMPLE", "COMPOSITOR_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
