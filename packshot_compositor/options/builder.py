from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from packshot_compositor.app.errors import InvalidConfiguration
from packshot_compositor.options.schemas import BuildCompositedImageOptions, CompositingRequest


def _error_details(ve: ValidationError) -> List[Dict[str, Any]]:
    # include_input=False keeps image buffers out of the error payload
    return [
        {
            "loc": ".".join(str(p) for p in e.get("loc", ())),
            "type": e.get("type"),
            "msg": e.get("msg"),
        }
        for e in ve.errors(include_url=False, include_input=False)
    ]


def _invalid(ve: ValidationError) -> InvalidConfiguration:
    details = _error_details(ve)
    summary = "; ".join(f"{d['loc'] or '<root>'}: {d['msg']}" for d in details)
    return InvalidConfiguration(f"Invalid compositing request: {summary}", errors=details)


def build_request(
    background: bytes,
    overlay: bytes,
    background_color: Sequence[int],
    resize_mode: Optional[Union[Mapping[str, Any], Any]] = None,
    offset_mode: Optional[Union[Mapping[str, Any], Any]] = None,
) -> CompositingRequest:
    """
    Validate caller input into an immutable CompositingRequest.
    resize_mode / offset_mode accept tagged dicts ({"type": "Scale", "value": 1})
    or the mode models. Raises InvalidConfiguration on any invariant violation.
    """
    payload: Dict[str, Any] = {
        "background": background,
        "overlay": overlay,
        "background_color": background_color,
        "resize_mode": resize_mode,
        "offset_mode": offset_mode,
    }
    try:
        return CompositingRequest.model_validate(payload)
    except ValidationError as ve:
        raise _invalid(ve) from ve


def request_from_options(
    background: bytes,
    overlay: bytes,
    options: Union[BuildCompositedImageOptions, Mapping[str, Any]],
) -> CompositingRequest:
    """Same as build_request, but takes an options object / dict (camelCase or snake_case keys)."""
    if not isinstance(options, (BuildCompositedImageOptions, Mapping)):
        raise InvalidConfiguration(
            f"options must be BuildCompositedImageOptions or a mapping, got {type(options).__name__}"
        )
    try:
        return CompositingRequest.from_options(background, overlay, options)
    except ValidationError as ve:
        raise _invalid(ve) from ve
