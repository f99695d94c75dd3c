"""
Turning stops into paintable gradients: interpolation at arbitrary
positions, projection of stops into a zoomed window, and rasterization.
"""

from .interpolation import interpolated_color, lerp_rgba, sample_colors
from .projection import project_stops, project_color_map
from .renderer import render_strip, render_color_map, to_image, to_uint8, save_preview

__all__ = [
    # Interpolation
    'interpolated_color',
    'lerp_rgba',
    'sample_colors',

    # Projection
    'project_stops',
    'project_color_map',

    # Rendering
    'render_strip',
    'render_color_map',
    'to_image',
    'to_uint8',
    'save_preview',
]
