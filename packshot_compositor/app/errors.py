from __future__ import annotations

from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base application error"""


class ConfigError(AppError):
    """Missing or invalid configuration"""


class InvalidConfiguration(AppError):
    """A compositing request violates one of its invariants"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors: List[Dict[str, Any]] = errors or []


class ToolInvocationError(AppError):
    """Tool execution failed (decode, resize, compose, encode)"""


class ImageDecodeError(ToolInvocationError):
    """Image buffer could not be decoded"""
