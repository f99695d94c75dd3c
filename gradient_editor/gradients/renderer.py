"""
Paint breakpoint lists into pixel arrays.

A breakpoint list is what a native linear-gradient call consumes:
``[(color, location), ...]`` with locations in [0, 1], non-decreasing, where
two breakpoints at the same location make a hard edge. Rendering it here
means sampling that piecewise-linear curve once per pixel along the strip:

    u_k = k / (length - 1)          for k in 0 .. length - 1
    Render(u) = lerp between the breakpoints bracketing u

Before the first and after the last breakpoint the edge color is held.
"""
from __future__ import annotations
from typing import Optional, Sequence
import numpy as np
from numpy import ndarray as NDArray
from ..defaults import RENDER_THICKNESS, value_or_default
from ..geometry.layout import GradientLayoutGeometry
from ..models.color_map import ColorMap, RenderStop
from .projection import project_color_map


def render_strip(render_stops: Sequence[RenderStop], length: int) -> NDArray:
    """
    Sample breakpoints at ``length`` evenly spaced locations.

    Args:
        render_stops: Breakpoints ordered by location
        length: Number of samples (pixels) along the strip

    Returns:
        Float RGBA array of shape (length, 4)
    """
    if length <= 0:
        return np.zeros((0, 4), dtype=np.float64)
    if not render_stops:
        return np.zeros((length, 4), dtype=np.float64)

    u = np.linspace(0.0, 1.0, length) if length > 1 else np.zeros(1)
    locations = np.array([stop.location for stop in render_stops], dtype=np.float64)
    colors = np.array([stop.color.value for stop in render_stops], dtype=np.float64)

    # repeated locations give a hard edge
    return np.column_stack([
        np.interp(u, locations, colors[:, channel])
        for channel in range(4)
    ])


def to_uint8(rgba: NDArray) -> NDArray:
    return np.round(np.clip(rgba, 0.0, 1.0) * 255).astype(np.uint8)


def render_color_map(
    color_map: ColorMap,
    geometry: GradientLayoutGeometry,
    thickness: Optional[int] = None,
) -> NDArray:
    """
    Render the visible window of a color map as an image array.

    The strip runs top-to-bottom for a vertical geometry and left-to-right
    for a horizontal one.

    Args:
        color_map: Gradient to paint
        geometry: Supplies the visible window, orientation and strip length
        thickness: Cross-axis size in pixels

    Returns:
        uint8 RGBA array, (length, thickness, 4) when vertical,
        (thickness, length, 4) when horizontal
    """
    thickness = value_or_default(thickness, RENDER_THICKNESS)
    length = int(round(geometry.strip_length))
    line = to_uint8(render_strip(project_color_map(color_map, geometry), length))
    if geometry.is_vertical:
        return np.repeat(line[:, np.newaxis, :], thickness, axis=1)
    return np.repeat(line[np.newaxis, :, :], thickness, axis=0)


def to_image(rgba: NDArray):
    """Wrap a uint8 RGBA array in a Pillow image."""
    from PIL import Image

    return Image.fromarray(np.ascontiguousarray(rgba, dtype=np.uint8))


def save_preview(color_map: ColorMap, geometry: GradientLayoutGeometry, output_path, thickness: Optional[int] = None):
    """Render a color map and write it to ``output_path`` (format from the extension)."""
    img = to_image(render_color_map(color_map, geometry, thickness))
    img.save(output_path)
    return img
