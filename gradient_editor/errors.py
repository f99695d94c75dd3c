"""
Error types raised by the gradient editor.

Everything derives from :class:`GradientEditorError` so callers can catch the
whole family at once. Geometry and interpolation never raise; only the
serialization layer and the editor state do.
"""
from __future__ import annotations
from typing import Optional


class GradientEditorError(Exception):
    """Base class for all gradient editor errors."""

    recovery_suggestion: str = "Try the operation again."


class DecodeError(GradientEditorError, ValueError):
    """A serialized gradient payload is malformed.

    Args:
        message: What is wrong with the payload.
        path: Location of the offending field, e.g. ``stops[1].secondColor``.
    """

    recovery_suggestion = "Check that the gradient data is valid and try again."

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        self.reason = message
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class EncodeError(GradientEditorError, ValueError):
    """A gradient value cannot be represented in the wire format."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        self.reason = message
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class InsufficientColorStopsError(GradientEditorError):
    """The gradient has fewer color stops than the editor requires."""

    recovery_suggestion = "Add at least two color stops to the gradient."

    def __init__(self, count: int, minimum: int = 2) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"A gradient needs at least {minimum} color stops, got {count}")


class InvalidStopPositionError(GradientEditorError, ValueError):
    """A color stop position lies outside [0, 1]."""

    recovery_suggestion = "Move the color stop to a position between 0 and 1."

    def __init__(self, position: float, stop_id: Optional[str] = None) -> None:
        self.position = position
        self.stop_id = stop_id
        where = f" for stop {stop_id}" if stop_id else ""
        super().__init__(f"Invalid stop position {position!r}{where}; must be between 0 and 1")


class StopNotFoundError(GradientEditorError, KeyError):
    """No color stop with the given id exists in the editor."""

    def __init__(self, stop_id: str) -> None:
        self.stop_id = stop_id
        super().__init__(stop_id)

    def __str__(self) -> str:
        return f"No color stop with id {self.stop_id!r}"
