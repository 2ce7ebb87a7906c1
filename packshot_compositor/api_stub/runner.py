from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from packshot_compositor.app.logging import setup_logging
from packshot_compositor.app.settings import Settings, load_settings
from packshot_compositor.core.hashing import sha256_of_bytes, short_digest
from packshot_compositor.core.ids import new_artifact_id
from packshot_compositor.options.builder import request_from_options
from packshot_compositor.options.schemas import (
    BuildCompositedImageOptions,
    CompositeResult,
    CompositingRequest,
)
from packshot_compositor.tools.exporters.encode_png import PNG_MIME, encode_png
from packshot_compositor.tools.exporters.write_artifact import write_artifact
from packshot_compositor.tools.image_ops.compose_layers import compose, new_canvas
from packshot_compositor.tools.image_ops.decode import decode_image
from packshot_compositor.tools.image_ops.resize import resize_image

logger = logging.getLogger(__name__)

Options = Union[BuildCompositedImageOptions, Mapping[str, Any]]
PathLike = Union[str, Path]


def composite_request(
    request: CompositingRequest,
    *,
    output_path: Optional[PathLike] = None,
    settings: Optional[Settings] = None,
) -> CompositeResult:
    """
    Run an already-validated request:
      - decode both buffers
      - resize the product (background) image if a resize mode is set
      - canvas = overlay size, filled with background_color
      - product placed by offset_mode, overlay centered on top
      - encode PNG (and write it if output_path is given)
    """
    settings = settings or Settings()

    product = decode_image(request.background, role="background")
    overlay = decode_image(request.overlay, role="overlay")

    if request.resize_mode is not None:
        product = resize_image(product, request.resize_mode, resample=settings.resample)

    canvas = new_canvas(overlay.size, request.background_color)
    product_xy = compose(canvas, product, overlay, request.offset_mode)
    logger.debug(
        "placed product %sx%s at %s on %sx%s canvas",
        product.width,
        product.height,
        product_xy,
        canvas.width,
        canvas.height,
        extra={"ctx": {"offset_mode": request.offset_mode.model_dump(), "position": list(product_xy)}},
    )

    png = encode_png(canvas)
    uri = write_artifact(png, output_path) if output_path is not None else None

    result = CompositeResult(
        artifact_id=new_artifact_id(),
        data=png,
        mime=PNG_MIME,
        width=canvas.width,
        height=canvas.height,
        byte_size=len(png),
        sha256=sha256_of_bytes(png),
        uri=uri,
        meta={
            "product_size": list(product.size),
            "product_position": list(product_xy),
            "resize_mode": request.resize_mode.model_dump() if request.resize_mode else None,
            "offset_mode": request.offset_mode.model_dump(),
            "background_color": list(request.background_color),
            "resample": settings.resample,
            "created_at": datetime.now(timezone.utc).isoformat(),
        },
    )
    logger.info(
        "composited image %sx%s (%s bytes) from background=%s overlay=%s",
        result.width,
        result.height,
        result.byte_size,
        short_digest(request.background),
        short_digest(request.overlay),
        extra={"ctx": {"artifact_id": result.artifact_id, "uri": uri}},
    )
    return result


def build_composited_image(
    background: bytes,
    overlay: bytes,
    options: Options,
    *,
    output_path: Optional[PathLike] = None,
    settings: Optional[Settings] = None,
) -> CompositeResult:
    """
    Main entrypoint: validate options into a CompositingRequest (raises
    InvalidConfiguration before touching pixels), then composite it.
    """
    request = request_from_options(background, overlay, options)
    return composite_request(request, output_path=output_path, settings=settings)


def build_composited_image_from_paths(
    background_path: PathLike,
    overlay_path: PathLike,
    options: Options,
    *,
    output_path: Optional[PathLike] = None,
    settings: Optional[Settings] = None,
) -> CompositeResult:
    """
    Read both images from explicit paths and composite them.
    A missing file raises FileNotFoundError as-is.
    """
    background = Path(background_path).read_bytes()
    overlay = Path(overlay_path).read_bytes()
    return build_composited_image(
        background,
        overlay,
        options,
        output_path=output_path,
        settings=settings,
    )


def run_from_env(
    background_path: PathLike,
    overlay_path: PathLike,
    options: Options,
    *,
    output_name: str = "result.png",
) -> CompositeResult:
    """
    Script-style entrypoint:
    - load settings (.env + environment)
    - set up JSON logging
    - composite and write <output_dir>/<output_name>
    """
    s = load_settings()
    setup_logging(s.log_level)

    return build_composited_image_from_paths(
        background_path,
        overlay_path,
        options,
        output_path=Path(s.output_dir) / output_name,
        settings=s,
    )
