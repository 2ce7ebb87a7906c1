from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

# -----------------------------
# Core Types
# -----------------------------

Channel = Annotated[StrictInt, Field(ge=0, le=255)]

# Largest width or height (px) a resized image may have.
MAX_DIMENSION = 16384

# ints are accepted and widened; str, bytes and bool are not
StrictFiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]

# (r, g, b, a)
RGBAColor = Tuple[Channel, Channel, Channel, Channel]

# Encoded raster image (png, jpeg, ...). Content is only checked for non-emptiness here;
# decoding happens in the image ops.
ImageBuffer = Annotated[bytes, Field(min_length=1, repr=False)]

# -----------------------------
# Resize Modes
# -----------------------------

class ScaleResize(BaseModel):
    """Uniform scale factor applied to both dimensions."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["Scale"] = "Scale"
    value: StrictFiniteFloat = Field(..., gt=0.0, le=MAX_DIMENSION)

class WidthResize(BaseModel):
    """Target width in px, height follows the aspect ratio."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["Width"] = "Width"
    value: StrictInt = Field(..., gt=0, le=MAX_DIMENSION)

class HeightResize(BaseModel):
    """Target height in px, width follows the aspect ratio."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["Height"] = "Height"
    value: StrictInt = Field(..., gt=0, le=MAX_DIMENSION)

ResizeMode = Annotated[
    Union[ScaleResize, WidthResize, HeightResize],
    Field(discriminator="type"),
]

# -----------------------------
# Offset Modes
# -----------------------------

class PercentOffset(BaseModel):
    """Anchor at (x%, y%) of the canvas. Values outside 0..100 are kept as-is
    and simply place the image past the canvas edge."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["Percent"] = "Percent"
    value: Tuple[StrictFiniteFloat, StrictFiniteFloat]

class PixelOffset(BaseModel):
    """Anchor at absolute canvas pixels; the image is centered on the anchor."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["Pixel"] = "Pixel"
    value: Tuple[StrictInt, StrictInt]

class CenterOffset(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["Center"] = "Center"

OffsetMode = Annotated[
    Union[PercentOffset, PixelOffset, CenterOffset],
    Field(discriminator="type"),
]

# -----------------------------
# Options / Request
# -----------------------------

class BuildCompositedImageOptions(BaseModel):
    """
    How to build the composited image.
    Accepts snake_case names or the camelCase keys used by JSON callers:
      {"backgroundColor": [0, 0, 255, 255],
       "resizeMode": {"type": "Scale", "value": 1},
       "offsetMode": {"type": "Percent", "value": [50, 50]}}
    """
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    background_color: RGBAColor = Field(..., alias="backgroundColor")
    resize_mode: Optional[ResizeMode] = Field(default=None, alias="resizeMode")  # None -> keep size
    offset_mode: OffsetMode = Field(default_factory=CenterOffset, alias="offsetMode")

    @field_validator("offset_mode", mode="before")
    @classmethod
    def _default_offset(cls, v: Any) -> Any:
        return CenterOffset() if v is None else v

class CompositingRequest(BuildCompositedImageOptions):
    """Immutable value handed to the compositing pipeline: both buffers plus the options."""

    background: ImageBuffer
    overlay: ImageBuffer

    @classmethod
    def from_options(
        cls,
        background: bytes,
        overlay: bytes,
        options: Union[BuildCompositedImageOptions, Mapping[str, Any]],
    ) -> "CompositingRequest":
        data: Dict[str, Any] = dict(options)
        data["background"] = background
        data["overlay"] = overlay
        return cls.model_validate(data)

# -----------------------------
# Result
# -----------------------------

class CompositeResult(BaseModel):
    """What the pipeline returns: the encoded image plus artifact metadata."""
    model_config = ConfigDict(frozen=True)

    artifact_id: str
    data: bytes = Field(repr=False)
    mime: Literal["image/png"] = "image/png"
    width: int
    height: int
    byte_size: int
    sha256: str
    uri: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
