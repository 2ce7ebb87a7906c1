"""Errors, settings and JSON logging shared by the compositor."""

from packshot_compositor.app.errors import (
    AppError,
    ConfigError,
    ImageDecodeError,
    InvalidConfiguration,
    ToolInvocationError,
)
from packshot_compositor.app.logging import JsonFormatter, setup_logging
from packshot_compositor.app.settings import Settings, load_settings

__all__ = [
    "AppError",
    "ConfigError",
    "ImageDecodeError",
    "InvalidConfiguration",
    "ToolInvocationError",
    "JsonFormatter",
    "setup_logging",
    "Settings",
    "load_settings",
]
