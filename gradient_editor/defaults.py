"""
Module-level defaults for the gradient editor.

Everything tunable lives here as a constant; functions that accept an
optional override fall back to these through :func:`value_or_default`.
"""
from typing import Optional, Tuple, TypeVar

T = TypeVar('T')

# Cross-axis width of the gradient strip, in view units.
STRIP_WIDTH: float = 100.0

# Smallest strip length, keeps the coordinate transforms away from zero division.
MIN_STRIP_LENGTH: float = 1.0

MIN_ZOOM: float = 1.0
MAX_ZOOM: float = 4.0

MIN_PAN: float = 0.0
MAX_PAN: float = 1.0

# A gradient is only editable with at least this many stops.
MIN_STOP_COUNT: int = 2

# New stops are dropped in the middle of the gradient.
NEW_STOP_POSITION: float = 0.5

# Candidate colors for a freshly added stop, picked at random (0-255 RGB).
NEW_STOP_COLORS: Tuple[Tuple[int, int, int], ...] = (
    (255, 0, 0),
    (255, 165, 0),
    (255, 255, 0),
    (0, 255, 0),
    (0, 0, 255),
    (128, 0, 128),
)

# Indentation used by GradientColorScheme.to_json.
JSON_INDENT: Optional[int] = 2

# Thickness of a rendered preview strip when none is requested.
RENDER_THICKNESS: int = 32


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
