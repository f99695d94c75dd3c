#gradient_editor\gradients\projection.py
from __future__ import annotations
from typing import List, Sequence
from ..geometry.layout import GradientLayoutGeometry
from ..models.color_map import ColorMap, RenderStop
from ..models.color_stop import ColorStop
from .interpolation import interpolated_color


def project_stops(sorted_stops: Sequence[ColorStop], start: float, end: float) -> List[RenderStop]:
    """
    Project stops into the visible window ``[start, end]``.

    Locations are remapped to [0, 1] relative to the window. When the
    nearest real stop does not sit on a window edge, the color at that edge is
    interpolated and added at location 0 or 1. A window with no stops in it
    becomes a flat two-breakpoint gradient.

    Args:
        sorted_stops: Stops sorted by ascending position
        start: Window start in gradient space
        end: Window end in gradient space (greater than start)

    Returns:
        Ordered breakpoints ready for a linear gradient paint call.
    """
    span = end - start
    visible = [stop for stop in sorted_stops if start <= stop.position <= end]
    if not visible:
        return [
            RenderStop(interpolated_color(sorted_stops, start), 0.0),
            RenderStop(interpolated_color(sorted_stops, end), 1.0),
        ]

    render_stops: List[RenderStop] = []
    if visible[0].position > start:
        render_stops.append(RenderStop(interpolated_color(sorted_stops, start), 0.0))

    for stop in visible:
        location = (stop.position - start) / span
        for color in stop.type.colors:
            render_stops.append(RenderStop(color, location))

    if visible[-1].position < end:
        render_stops.append(RenderStop(interpolated_color(sorted_stops, end), 1.0))
    return render_stops


def project_color_map(color_map: ColorMap, geometry: GradientLayoutGeometry) -> List[RenderStop]:
    """Sort a map's stops and project them into the geometry's visible range."""
    start, end = geometry.visible_range
    return project_stops(color_map.sorted_stops(), start, end)
