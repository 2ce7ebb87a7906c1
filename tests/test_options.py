from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from packshot_compositor.app.errors import InvalidConfiguration
from packshot_compositor.options.schemas import MAX_DIMENSION
from packshot_compositor.options import (
    BuildCompositedImageOptions,
    CenterOffset,
    PercentOffset,
    PixelOffset,
    ScaleResize,
    WidthResize,
    build_request,
    request_from_options,
)

BG = b"\x89PNG-not-really"
OV = b"overlay-bytes"


def _request(**overrides):
    kwargs = {
        "background": BG,
        "overlay": OV,
        "background_color": [0, 0, 255, 255],
        "resize_mode": {"type": "Scale", "value": 1},
        "offset_mode": {"type": "Percent", "value": [50, 50]},
    }
    kwargs.update(overrides)
    return build_request(**kwargs)


def test_reference_configuration_is_accepted():
    req = _request()

    assert req.background_color == (0, 0, 255, 255)
    assert isinstance(req.resize_mode, ScaleResize)
    assert req.resize_mode.value == 1.0
    assert isinstance(req.offset_mode, PercentOffset)
    assert req.offset_mode.value == (50.0, 50.0)


@pytest.mark.parametrize(
    "color",
    [[0, 0, 0, 0], [255, 255, 255, 255], [12, 34, 56, 78], (0, 128, 255, 0)],
)
def test_colors_in_range_are_accepted(color):
    assert _request(background_color=color).background_color == tuple(color)


@pytest.mark.parametrize(
    "color",
    [
        [256, 0, 0, 255],
        [0, 0, 0, -1],
        [0, 300, 0, 0],
        [0, 0, 255],
        [0, 0, 255, 255, 0],
        [1.5, 0, 0, 0],
        [True, 0, 0, 0],
        "blue",
    ],
)
def test_colors_out_of_range_or_malformed_are_rejected(color):
    with pytest.raises(InvalidConfiguration):
        _request(background_color=color)


@pytest.mark.parametrize("value", [0.01, 0.5, 1, 2.5, 1000])
def test_positive_scale_is_accepted(value):
    assert _request(resize_mode={"type": "Scale", "value": value}).resize_mode.value == value


@pytest.mark.parametrize("value", [0, -1, -0.5, float("nan"), float("inf")])
def test_non_positive_or_non_finite_scale_is_rejected(value):
    with pytest.raises(InvalidConfiguration):
        _request(resize_mode={"type": "Scale", "value": value})


@pytest.mark.parametrize("field", ["background", "overlay"])
def test_empty_buffers_are_rejected(field):
    with pytest.raises(InvalidConfiguration) as exc:
        _request(**{field: b""})

    assert field in [e["loc"] for e in exc.value.errors]


def test_buffer_content_is_not_inspected():
    # only non-emptiness is checked at construction time
    req = _request(background=b"x", overlay=b"y")
    assert req.background == b"x"
    assert req.overlay == b"y"


def test_identical_inputs_give_equal_requests():
    a = _request()
    b = _request()

    assert a == b
    assert hash(a) == hash(b)
    assert a is not b


def test_request_is_immutable():
    req = _request()
    with pytest.raises(ValidationError):
        req.background_color = (1, 2, 3, 4)


def test_invalid_configuration_chains_validation_error():
    with pytest.raises(InvalidConfiguration) as exc:
        _request(resize_mode={"type": "Scale", "value": 0})

    assert isinstance(exc.value.__cause__, ValidationError)
    assert exc.value.errors
    # raw buffers never end up in the message
    assert "not-really" not in str(exc.value)


@pytest.mark.parametrize("percent", [[-20, 150], [0, 0], [100, 100], [33.3, 250.0]])
def test_percent_outside_canvas_is_kept_unclamped(percent):
    req = _request(offset_mode={"type": "Percent", "value": percent})
    assert req.offset_mode.value == tuple(float(p) for p in percent)


def test_percent_must_be_finite_pair():
    with pytest.raises(InvalidConfiguration):
        _request(offset_mode={"type": "Percent", "value": [math.inf, 0]})
    with pytest.raises(InvalidConfiguration):
        _request(offset_mode={"type": "Percent", "value": [50]})


def test_other_mode_variants():
    req = _request(
        resize_mode={"type": "Width", "value": 200},
        offset_mode={"type": "Pixel", "value": [-10, 40]},
    )
    assert isinstance(req.resize_mode, WidthResize)
    assert isinstance(req.offset_mode, PixelOffset)
    assert req.offset_mode.value == (-10, 40)

    with pytest.raises(InvalidConfiguration):
        _request(resize_mode={"type": "Height", "value": 0})


def test_modes_are_optional():
    req = _request(resize_mode=None, offset_mode=None)

    assert req.resize_mode is None
    assert req.offset_mode == CenterOffset()


@pytest.mark.parametrize(
    "resize_mode, offset_mode",
    [
        ({"type": "Stretch", "value": 2}, None),
        (None, {"type": "Corner"}),
        ({"value": 2}, None),
        ({"type": "Scale", "value": 2, "extra": True}, None),
    ],
)
def test_unknown_or_malformed_tags_are_rejected(resize_mode, offset_mode):
    with pytest.raises(InvalidConfiguration):
        _request(resize_mode=resize_mode, offset_mode=offset_mode)


def test_request_from_camel_case_options():
    req = request_from_options(
        BG,
        OV,
        {
            "backgroundColor": [0, 0, 255, 255],
            "resizeMode": {"type": "Scale", "value": 1},
            "offsetMode": {"type": "Percent", "value": [50, 50]},
        },
    )
    assert req == _request()


def test_request_from_options_model():
    opts = BuildCompositedImageOptions(
        background_color=(0, 0, 255, 255),
        resize_mode=ScaleResize(value=1),
        offset_mode=PercentOffset(value=(50, 50)),
    )
    assert request_from_options(BG, OV, opts) == _request()


def test_request_from_options_rejects_unknown_keys_and_non_mappings():
    with pytest.raises(InvalidConfiguration):
        request_from_options(BG, OV, {"backgroundColor": [0, 0, 0, 0], "blendMode": "multiply"})
    with pytest.raises(InvalidConfiguration):
        request_from_options(BG, OV, [0, 0, 255, 255])
    with pytest.raises(InvalidConfiguration):
        request_from_options(b"", OV, {"backgroundColor": [0, 0, 0, 0]})


@pytest.mark.parametrize("value", ["2", b"2", True, None, [2]])
def test_scale_must_be_a_real_number(value):
    with pytest.raises(InvalidConfiguration):
        _request(resize_mode={"type": "Scale", "value": value})


def test_integer_scale_is_widened_to_float():
    value = _request(resize_mode={"type": "Scale", "value": 2}).resize_mode.value
    assert value == 2.0
    assert isinstance(value, float)


@pytest.mark.parametrize("kind", ["Width", "Height"])
@pytest.mark.parametrize("value", ["200", True, 200.0, 200.5])
def test_width_and_height_must_be_integers(kind, value):
    with pytest.raises(InvalidConfiguration):
        _request(resize_mode={"type": kind, "value": value})


@pytest.mark.parametrize(
    "resize_mode",
    [
        {"type": "Scale", "value": 1e308},
        {"type": "Scale", "value": MAX_DIMENSION + 1},
        {"type": "Width", "value": MAX_DIMENSION + 1},
        {"type": "Height", "value": 10**12},
    ],
)
def test_resize_values_are_bounded(resize_mode):
    with pytest.raises(InvalidConfiguration):
        _request(resize_mode=resize_mode)


def test_resize_values_at_the_limit_are_accepted():
    assert _request(resize_mode={"type": "Width", "value": MAX_DIMENSION}).resize_mode.value == MAX_DIMENSION
    assert _request(resize_mode={"type": "Scale", "value": MAX_DIMENSION}).resize_mode.value == MAX_DIMENSION


@pytest.mark.parametrize("value", [["5", "6"], [True, False], [1.5, 2], [b"5", 6]])
def test_pixel_offset_must_be_integers(value):
    with pytest.raises(InvalidConfiguration):
        _request(offset_mode={"type": "Pixel", "value": value})


@pytest.mark.parametrize("value", [["50", "50"], [True, 50], [50, None]])
def test_percent_offset_must_be_numbers(value):
    with pytest.raises(InvalidConfiguration):
        _request(offset_mode={"type": "Percent", "value": value})


def test_huge_finite_percent_is_accepted():
    req = _request(offset_mode={"type": "Percent", "value": [1e308, -1e308]})
    assert req.offset_mode.value == (1e308, -1e308)
