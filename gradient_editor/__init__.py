"""
Gradient Editor - Color Stop Gradients with Zoom and Pan
========================================================

Data model, coordinate math and rendering behind an interactive gradient
editor. Gradients are ordered lists of color stops; each stop is either a
single color or a dual color that makes a hard edge.

Key Features
------------
- Immutable color stops, color maps and named schemes
- Stable JSON wire format with path-aware decode errors
- Zoom (1x-4x) and pan transforms between gradient and view space
- Interpolation and projection of stops into a zoomed window
- numpy rasterization and Pillow previews
- Headless editing session (add, move, duplicate, delete, save)

Quick Start
-----------
>>> from gradient_editor import ColorMap, ColorStop, Single, GradientLayoutGeometry
>>> from gradient_editor import project_color_map, presets
>>>
>>> cmap = ColorMap([
...     ColorStop(0.0, Single(presets.RED)),
...     ColorStop(1.0, Single(presets.BLUE)),
... ])
>>> geometry = GradientLayoutGeometry((100, 400), zoom_level=2.0, pan_offset=0.0)
>>> geometry.visible_range
(0.0, 0.5)
>>> [stop.location for stop in project_color_map(cmap, geometry)]
[0.0, 1.0]

Modules
-------
- colors: RGBA color value and named presets
- models: Stop types, stops, color maps, schemes and built-in presets
- serialization: JSON encoding and decoding
- geometry: Zoom/pan layout transforms
- gradients: Interpolation, projection and rendering
- editor: Editing session and stop inspector
"""

from .colors import ColorRGBA, presets
from .models import (
    ColorStopType, Single, Dual,
    ColorStop, ColorMap, RenderStop,
    GradientColorScheme,
)
from .serialization import dumps, loads, dumps_scheme, loads_scheme
from .geometry import GradientLayoutGeometry, Orientation, Size, Rect
from .gradients import (
    interpolated_color, sample_colors,
    project_stops, project_color_map,
    render_strip, render_color_map, to_image, save_preview,
)
from .editor import GradientEditState, ColorStopEditor, StopEditorAction, EditorResult, EditorOutcome
from .errors import (
    GradientEditorError,
    DecodeError, EncodeError,
    InsufficientColorStopsError, InvalidStopPositionError,
    StopNotFoundError,
)

__version__ = "1.0.0"

__all__ = [
    # Colors
    "ColorRGBA", "presets",

    # Model
    "ColorStopType", "Single", "Dual",
    "ColorStop", "ColorMap", "RenderStop",
    "GradientColorScheme",

    # Serialization
    "dumps", "loads", "dumps_scheme", "loads_scheme",

    # Geometry
    "GradientLayoutGeometry", "Orientation", "Size", "Rect",

    # Gradients
    "interpolated_color", "sample_colors",
    "project_stops", "project_color_map",
    "render_strip", "render_color_map", "to_image", "save_preview",

    # Editor
    "GradientEditState", "ColorStopEditor", "StopEditorAction",
    "EditorResult", "EditorOutcome",

    # Errors
    "GradientEditorError",
    "DecodeError", "EncodeError",
    "InsufficientColorStopsError", "InvalidStopPositionError",
    "StopNotFoundError",

    # Version
    "__version__",
]
