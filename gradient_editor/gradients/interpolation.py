"""
Color interpolation along a sorted stop list.

Stops are treated asymmetrically at a Dual edge: the segment arriving at a
stop ends on its ``start_color`` and the segment leaving it begins with its
``end_color``. There is no extrapolation past the first or last stop.
"""
from __future__ import annotations
from typing import Sequence
import numpy as np
from numpy import ndarray
from ..colors.color import ColorRGBA
from ..colors.presets import CLEAR
from ..models.color_stop import ColorStop


def lerp_rgba(start: ColorRGBA, end: ColorRGBA, t: float) -> ColorRGBA:
    """Naive per-channel RGBA lerp, no color-space correction."""
    return start.lerp(end, t)


def interpolated_color(sorted_stops: Sequence[ColorStop], position: float) -> ColorRGBA:
    """
    Color of the gradient at ``position``.

    Args:
        sorted_stops: Stops sorted by ascending position
        position: Position in gradient space

    Returns:
        The interpolated color; CLEAR when there are no stops.
    """
    if not sorted_stops:
        return CLEAR
    first = sorted_stops[0]
    last = sorted_stops[-1]
    if position <= first.position:
        return first.type.start_color
    if position >= last.position:
        return last.type.end_color

    prev_stop = None
    next_stop = None
    for stop in sorted_stops:
        if stop.position <= position:
            prev_stop = stop
        if stop.position >= position and next_stop is None:
            next_stop = stop

    if prev_stop is None or next_stop is None:
        return CLEAR
    if prev_stop is next_stop or prev_stop.position == next_stop.position:
        return prev_stop.type.start_color

    t = (position - prev_stop.position) / (next_stop.position - prev_stop.position)
    return lerp_rgba(prev_stop.type.end_color, next_stop.type.start_color, t)


def sample_colors(sorted_stops: Sequence[ColorStop], positions: ndarray) -> ndarray:
    """
    Vectorized :func:`interpolated_color` over an array of positions.

    Args:
        sorted_stops: Stops sorted by ascending position
        positions: 1D array of gradient positions

    Returns:
        Float array of shape (N, 4)
    """
    positions = np.asarray(positions, dtype=np.float64)
    out = np.empty(positions.shape + (4,), dtype=np.float64)
    if not sorted_stops:
        out[...] = CLEAR.value
        return out

    stop_positions = np.array([stop.position for stop in sorted_stops], dtype=np.float64)
    starts = np.array([stop.type.start_color.value for stop in sorted_stops], dtype=np.float64)
    ends = np.array([stop.type.end_color.value for stop in sorted_stops], dtype=np.float64)

    # prev = last stop at or before p, next = first stop at or after p
    prev_idx = np.searchsorted(stop_positions, positions, side="right") - 1
    next_idx = np.searchsorted(stop_positions, positions, side="left")
    prev_idx = np.clip(prev_idx, 0, len(sorted_stops) - 1)
    next_idx = np.clip(next_idx, 0, len(sorted_stops) - 1)

    span = stop_positions[next_idx] - stop_positions[prev_idx]
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.where(span > 0, (positions - stop_positions[prev_idx]) / span, 0.0)
    t = t[..., np.newaxis]
    out[...] = ends[prev_idx] + (starts[next_idx] - ends[prev_idx]) * t

    exact = (span == 0)[..., np.newaxis]
    out[...] = np.where(exact, starts[prev_idx], out)
    out[positions <= stop_positions[0]] = starts[0]
    out[positions >= stop_positions[-1]] = ends[-1]
    return out


__all__ = [
    'lerp_rgba',
    'interpolated_color',
    'sample_colors',
]
