from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union
import numpy as np
from numpy import ndarray
from ..defaults import MAX_ZOOM, MIN_STRIP_LENGTH, MIN_ZOOM, STRIP_WIDTH


class Orientation(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Size(NamedTuple):
    width: float
    height: float


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float


SizeLike = Union[Size, Tuple[float, float]]


class GradientLayoutGeometry:
    """
    Maps between gradient space and view space for a zoomable gradient strip.

    Gradient space is the normalized [0, 1] position along the gradient. View
    space is the pixel offset along the strip's long axis. Zoom (1x-4x) shows
    ``1 / zoom_level`` of gradient space across the whole strip; pan (0-1)
    slides that window from the start to the end of the gradient.

    Every method is total: positions outside the visible window give ``None``
    rather than raising.

    Args:
        view_size: (width, height) of the rendering surface.
        zoom_level: 1.0 shows the whole gradient, 4.0 one quarter of it. Clamped to that range.
        pan_offset: Window position, only meaningful when zoomed in.
        strip_width: Fixed cross-axis width of the strip.
    """
    __slots__ = ('view_size', 'zoom_level', 'pan_offset', 'strip_width')

    def __init__(
        self,
        view_size: SizeLike,
        zoom_level: float = 1.0,
        pan_offset: float = 0.0,
        strip_width: float = STRIP_WIDTH,
    ) -> None:
        self.view_size = Size(float(view_size[0]), float(view_size[1]))
        # 1x - 4x
        self.zoom_level = max(MIN_ZOOM, min(MAX_ZOOM, float(zoom_level)))
        self.pan_offset = float(pan_offset)
        self.strip_width = float(strip_width)

    # ------------------ DERIVED QUANTITIES ------------------
    @property
    def orientation(self) -> Orientation:
        """Horizontal only for strictly landscape views; square views are vertical."""
        if self.view_size.width > self.view_size.height:
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL

    @property
    def is_vertical(self) -> bool:
        return self.orientation is Orientation.VERTICAL

    @property
    def strip_length(self) -> float:
        """Size along the scrollable axis, never below 1 so divisions stay safe."""
        length = self.view_size.height if self.is_vertical else self.view_size.width
        return max(length, MIN_STRIP_LENGTH)

    @property
    def visible_length(self) -> float:
        return self.strip_length / self.zoom_level

    @property
    def max_pan(self) -> float:
        return 1.0 - 1.0 / self.zoom_level

    @property
    def visible_range_start(self) -> float:
        if self.zoom_level <= 1.0:
            return 0.0
        return self.pan_offset * self.max_pan

    @property
    def visible_range_end(self) -> float:
        return self.visible_range_start + 1.0 / self.zoom_level

    @property
    def visible_range(self) -> Tuple[float, float]:
        return (self.visible_range_start, self.visible_range_end)

    @property
    def gradient_strip_frame(self) -> Rect:
        if self.is_vertical:
            return Rect(0.0, 0.0, self.strip_width, self.strip_length)
        return Rect(0.0, 0.0, self.strip_length, self.strip_width)

    # ------------------ TRANSFORMS ------------------
    def contains(self, gradient_position: float) -> bool:
        start, end = self.visible_range
        return start <= gradient_position <= end

    def view_coordinate(self, gradient_position: float) -> Optional[float]:
        """
        Gradient position -> offset along the strip.

        Returns:
            The view coordinate, or None when the position is outside the visible window.
        """
        start, end = self.visible_range
        if not start <= gradient_position <= end:
            return None
        relative = (gradient_position - start) / (end - start)
        return relative * self.strip_length

    def gradient_position(self, view_coordinate: float) -> float:
        """
        Offset along the strip -> gradient position.

        The result is clamped to the whole gradient [0, 1], not to the visible
        window, so dragging past the strip edge lands on 0 or 1.
        """
        start, end = self.visible_range
        position = start + (view_coordinate / self.strip_length) * (end - start)
        return max(0.0, min(1.0, position))

    def handle_offset(self, gradient_position: float) -> Optional[Size]:
        """
        Offset of a stop handle marker, or None when the stop is not visible.

        Vertical strips carry their handles on the trailing edge, horizontal
        strips along the top edge.
        """
        coord = self.view_coordinate(gradient_position)
        if coord is None:
            return None
        if self.is_vertical:
            return Size(self.strip_width, coord)
        return Size(coord, 0.0)

    # ------------------ VECTORIZED ------------------
    def view_coordinates(self, gradient_positions: ndarray) -> ndarray:
        """Array version of :meth:`view_coordinate`; hidden positions become NaN."""
        positions = np.asarray(gradient_positions, dtype=np.float64)
        start, end = self.visible_range
        coords = (positions - start) / (end - start) * self.strip_length
        visible = (positions >= start) & (positions <= end)
        return np.where(visible, coords, np.nan)

    def gradient_positions(self, view_coordinates: ndarray) -> ndarray:
        """Array version of :meth:`gradient_position`."""
        coords = np.asarray(view_coordinates, dtype=np.float64)
        start, end = self.visible_range
        return np.clip(start + (coords / self.strip_length) * (end - start), 0.0, 1.0)

    def __repr__(self) -> str:
        return (
            f"GradientLayoutGeometry(view_size={tuple(self.view_size)}, "
            f"zoom_level={self.zoom_level}, pan_offset={self.pan_offset})"
        )
