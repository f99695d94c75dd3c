"""
Gradient data model: stops, stop types, color maps and named schemes.

All types here are immutable values. Editing a gradient means building new
instances (``with_position``, ``with_stops`` ...) and swapping them in.
"""

from .color_stop_type import ColorStopType, Single, Dual
from .color_stop import ColorStop, new_id
from .color_map import ColorMap, RenderStop, flatten_stops
from .scheme import GradientColorScheme

__all__ = [
    "ColorStopType",
    "Single",
    "Dual",
    "ColorStop",
    "new_id",
    "ColorMap",
    "RenderStop",
    "flatten_stops",
    "GradientColorScheme",
]
