"""
Headless gradient editing session.

``GradientEditState`` owns the stops being edited, the zoom and pan of the
strip, the current selection and the stop inspector. Nothing here draws;
a front end reads ``color_stops`` / ``render_stops()`` and forwards user
input to the methods below.
"""
from __future__ import annotations
import logging
import math
import random
from typing import Dict, List, Optional
from ..colors.color import ColorRGBA
from ..defaults import (
    MAX_PAN,
    MAX_ZOOM,
    MIN_PAN,
    MIN_STOP_COUNT,
    MIN_ZOOM,
    NEW_STOP_COLORS,
    NEW_STOP_POSITION,
)
from ..errors import InsufficientColorStopsError, InvalidStopPositionError, StopNotFoundError
from ..geometry.layout import GradientLayoutGeometry, SizeLike
from ..gradients.projection import project_stops
from ..models.color_map import ColorMap, RenderStop
from ..models.color_stop import ColorStop
from ..models.color_stop_type import Single
from ..models.scheme import GradientColorScheme
from .result import CompletionHandler, EditorResult
from .stop_editor import ColorStopEditor, StopEditorAction, StopEditorEvent

logger = logging.getLogger(__name__)


class GradientEditState:
    """
    Editing session for one gradient scheme.

    Args:
        scheme: Scheme to edit. Its name, description and ids are kept on save.
        on_complete: Called once with an :class:`EditorResult` on save or cancel.
    """

    def __init__(self, scheme: GradientColorScheme, on_complete: Optional[CompletionHandler] = None) -> None:
        self.scheme = scheme
        self.on_complete = on_complete
        self.zoom_level: float = MIN_ZOOM
        self.pan_offset: float = MIN_PAN
        self.is_editing_stop: bool = False
        self.selected_stop: Optional[ColorStop] = None
        self.edit_position: float = NEW_STOP_POSITION

        self.stop_editor = ColorStopEditor(ColorStop.default_start())
        self._unsubscribe = self.stop_editor.subscribe(self._handle)

        self._stops: Dict[str, ColorStop] = {}
        self._set_stops(scheme.color_map.stops)

    # ------------------ STOPS ------------------
    @property
    def stops(self) -> Dict[str, ColorStop]:
        """Id-keyed copy of the stops, in insertion order."""
        return dict(self._stops)

    @property
    def color_stops(self) -> List[ColorStop]:
        """Stops sorted by position; equal positions keep insertion order."""
        return sorted(self._stops.values(), key=lambda stop: stop.position)

    @property
    def can_delete(self) -> bool:
        return len(self._stops) > MIN_STOP_COUNT

    def _set_stops(self, stops) -> None:
        self._stops = {stop.id: stop for stop in stops}
        self.stop_editor.can_delete = self.can_delete

    def _put(self, stop: ColorStop) -> None:
        self._stops[stop.id] = stop
        self.stop_editor.can_delete = self.can_delete

    def _remove(self, stop_id: str) -> None:
        del self._stops[stop_id]
        self.stop_editor.can_delete = self.can_delete

    def stop(self, stop_id: str) -> ColorStop:
        """Look up a stop by id, raising StopNotFoundError if there is none."""
        try:
            return self._stops[stop_id]
        except KeyError:
            raise StopNotFoundError(stop_id) from None

    # ------------------ ZOOM / PAN ------------------
    def update_zoom(self, zoom: float) -> None:
        """Set the zoom level, clamped to 1x-4x. Back at 1x the pan resets."""
        self.zoom_level = max(MIN_ZOOM, min(MAX_ZOOM, float(zoom)))
        if self.zoom_level == MIN_ZOOM:
            self.pan_offset = MIN_PAN
        logger.debug("Zoom %s, pan %s", self.zoom_level, self.pan_offset)

    def update_pan(self, pan: float) -> None:
        """Set the pan offset, clamped to [0, 1]. Has no effect at 1x."""
        if self.zoom_level <= MIN_ZOOM:
            self.pan_offset = MIN_PAN
            return
        self.pan_offset = max(MIN_PAN, min(MAX_PAN, float(pan)))
        logger.debug("Pan %s", self.pan_offset)

    def geometry(self, view_size: SizeLike) -> GradientLayoutGeometry:
        return GradientLayoutGeometry(view_size, self.zoom_level, self.pan_offset)

    def render_stops(self, view_size: SizeLike) -> List[RenderStop]:
        """Breakpoints for the currently visible window of the gradient."""
        start, end = self.geometry(view_size).visible_range
        return project_stops(self.color_stops, start, end)

    # ------------------ EDITING ------------------
    def update_position(self, stop_id: str, position: float) -> ColorStop:
        """Move a stop, keeping its id and color type."""
        stop = self.stop(stop_id)
        moved = stop.with_position(position)
        self._put(moved)
        self.edit_position = moved.position
        if self.selected_stop is not None and self.selected_stop.id == stop_id:
            self.selected_stop = moved
            self.stop_editor.change(moved)
        return moved

    def drag_to(self, stop_id: str, view_coordinate: float, view_size: SizeLike) -> ColorStop:
        """Move a stop to wherever a drag along the strip ended."""
        position = self.geometry(view_size).gradient_position(view_coordinate)
        return self.update_position(stop_id, position)

    def stop_tapped(self, stop_id: str) -> None:
        """Select a stop and open the inspector on it."""
        self._activate(self.stop(stop_id))
        self.is_editing_stop = True

    def add_stop(self, color: Optional[ColorRGBA] = None) -> ColorStop:
        """
        Add a single-color stop in the middle of the gradient.

        Args:
            color: Color of the new stop. Picked at random from the
                new-stop palette when omitted.

        Returns:
            The stop that was added.
        """
        if color is None:
            color = ColorRGBA.from_ints(*random.choice(NEW_STOP_COLORS))
        stop = ColorStop(position=NEW_STOP_POSITION, type=Single(color))
        self._put(stop)
        logger.debug("Added stop %s at %s", stop.id, stop.position)
        return stop

    def _activate(self, stop: ColorStop) -> None:
        logger.debug("Selected stop %s", stop.id)
        self.selected_stop = stop
        self.stop_editor.change(stop)
        self.edit_position = stop.position

    # ------------------ INSPECTOR ACTIONS ------------------
    def _handle(self, event: StopEditorEvent) -> None:
        action = event.action
        if action is StopEditorAction.UPDATED_STOP:
            self._replace(event.stop)
        elif action is StopEditorAction.PREV:
            self._select_offset(-1)
        elif action is StopEditorAction.NEXT:
            self._select_offset(1)
        elif action is StopEditorAction.DELETE:
            self._delete_selected()
        elif action is StopEditorAction.DUPLICATE:
            self._duplicate_selected()
        elif action is StopEditorAction.CLOSE:
            self.is_editing_stop = False
            self.selected_stop = None

    def _replace(self, stop: ColorStop) -> None:
        if stop.id not in self._stops:
            logger.debug("Ignoring update for unknown stop %s", stop.id)
            return
        self._put(stop)
        self.edit_position = stop.position
        if self.selected_stop is not None and self.selected_stop.id == stop.id:
            self.selected_stop = stop

    def _selected_index(self, sorted_stops: List[ColorStop]) -> Optional[int]:
        if self.selected_stop is None:
            return None
        for index, stop in enumerate(sorted_stops):
            if stop.id == self.selected_stop.id:
                return index
        raise StopNotFoundError(self.selected_stop.id)

    def _select_offset(self, step: int) -> None:
        sorted_stops = self.color_stops
        index = self._selected_index(sorted_stops)
        if index is None:
            return
        self._activate(sorted_stops[(index + step) % len(sorted_stops)])

    def _delete_selected(self) -> None:
        if self.selected_stop is None:
            return
        if not self.can_delete:
            logger.warning(
                "Refusing to delete stop %s: a gradient needs at least %d stops",
                self.selected_stop.id, MIN_STOP_COUNT,
            )
            return
        stop_id = self.selected_stop.id
        self._select_offset(1)
        self._remove(stop_id)
        logger.debug("Deleted stop %s", stop_id)

    def _duplicate_selected(self) -> None:
        current = self.selected_stop
        if current is None:
            return
        sorted_stops = self.color_stops
        index = self._selected_index(sorted_stops)

        if index < len(sorted_stops) - 1:
            position = (current.position + sorted_stops[index + 1].position) / 2.0
        elif index > 0:
            position = (sorted_stops[index - 1].position + current.position) / 2.0
        else:
            position = NEW_STOP_POSITION

        duplicate = ColorStop(position=position, type=current.type)
        self._put(duplicate)
        logger.debug("Duplicated stop %s as %s at %s", current.id, duplicate.id, position)
        self._activate(duplicate)

    # ------------------ COMPLETION ------------------
    def update_scheme_metadata(self, name: str, description: str) -> None:
        self.scheme = self.scheme.with_metadata(name, description)

    def current_scheme(self) -> GradientColorScheme:
        """The scheme as edited so far: same ids and metadata, sorted stops."""
        color_map = ColorMap(self.color_stops, id=self.scheme.color_map.id)
        return GradientColorScheme(
            name=self.scheme.name,
            description=self.scheme.description,
            color_map=color_map,
            id=self.scheme.id,
        )

    def save(self) -> GradientColorScheme:
        scheme = self.current_scheme()
        if self.on_complete is not None:
            self.on_complete(EditorResult.saved(scheme))
        return scheme

    def cancel(self) -> None:
        if self.on_complete is not None:
            self.on_complete(EditorResult.cancelled())

    def validate(self) -> None:
        """
        Check that the edited gradient can be saved.

        Raises:
            InsufficientColorStopsError: Fewer than two stops remain.
            InvalidStopPositionError: A stop sits outside [0, 1] or at a non-finite position.
        """
        if len(self._stops) < MIN_STOP_COUNT:
            raise InsufficientColorStopsError(len(self._stops), MIN_STOP_COUNT)
        for stop in self._stops.values():
            if not math.isfinite(stop.position) or not 0.0 <= stop.position <= 1.0:
                raise InvalidStopPositionError(stop.position, stop.id)

    def close(self) -> None:
        """Detach from the inspector."""
        self._unsubscribe()

    def __repr__(self) -> str:
        return (
            f"GradientEditState(scheme={self.scheme.name!r}, stops={len(self._stops)}, "
            f"zoom_level={self.zoom_level}, pan_offset={self.pan_offset})"
        )
