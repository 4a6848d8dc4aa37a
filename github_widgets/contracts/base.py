"""
Base Contracts and Shared Types

These are the foundational types used across all layers.
All data types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- This module is READ-ONLY from all layers
- Layers may import types but MUST NOT modify this module
- Errors are exceptions carrying an explicit ErrorCode; nothing fails silently
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import math


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    Every failure a request can hit is enumerated here.
    """
    # Interval parsing errors
    MISSING_REQUIRED_FIELD = auto()
    INVALID_DATE_FORMAT = auto()

    # Request validation errors
    INVALID_PARAMETER = auto()
    FORBIDDEN_PARAMETER = auto()

    # Upstream errors
    UPSTREAM_NOT_FOUND = auto()
    UPSTREAM_FAILURE = auto()

    # Service errors
    CONFIGURATION = auto()


class WidgetError(Exception):
    """
    Base error for every failure surfaced to a caller.

    The API layer maps `status_code` to the HTTP status of the error card.
    """
    code: ErrorCode = ErrorCode.INVALID_PARAMETER
    status_code: int = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    @property
    def display_message(self) -> str:
        """Message as shown to the end user."""
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class MissingRequiredField(WidgetError):
    """A record lacks a required value (the start date)."""
    code = ErrorCode.MISSING_REQUIRED_FIELD


class InvalidDateFormat(WidgetError):
    """A date string is not YYYY, YYYY-MM or YYYY-MM-DD, or is not a real day."""
    code = ErrorCode.INVALID_DATE_FORMAT


class InvalidParameter(WidgetError):
    code = ErrorCode.INVALID_PARAMETER


class ForbiddenParameter(WidgetError):
    code = ErrorCode.FORBIDDEN_PARAMETER
    status_code = 403


class UpstreamNotFound(WidgetError):
    code = ErrorCode.UPSTREAM_NOT_FOUND
    status_code = 404


class UpstreamError(WidgetError):
    code = ErrorCode.UPSTREAM_FAILURE
    status_code = 502


class ConfigurationError(WidgetError):
    """Server-side misconfiguration. The detail is never shown to clients."""
    code = ErrorCode.CONFIGURATION
    status_code = 500

    @property
    def display_message(self) -> str:
        return "Server configuration error"


# =============================================================================
# GEOMETRY TYPES (Immutable)
# =============================================================================

@dataclass(frozen=True)
class Point:
    """A 2D point in SVG user units."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Margin:
    """Four-sided canvas margins in pixels."""
    top: float = 100
    right: float = 120
    bottom: float = 30
    left: float = 30
