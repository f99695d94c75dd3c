from __future__ import annotations
from enum import Enum
import logging
from typing import Callable, List, NamedTuple, Optional
from ..colors import presets
from ..colors.color import ColorRGBA
from ..models.color_stop import ColorStop
from ..models.color_stop_type import Dual, Single

logger = logging.getLogger(__name__)


class StopEditorAction(str, Enum):
    UPDATED_STOP = "updated_stop"
    PREV = "prev"
    NEXT = "next"
    DELETE = "delete"
    DUPLICATE = "duplicate"
    CLOSE = "close"


class StopEditorEvent(NamedTuple):
    action: StopEditorAction
    stop: Optional[ColorStop] = None


StopEditorListener = Callable[[StopEditorEvent], None]


class ColorStopEditor:
    """
    Inspector for a single color stop.

    Holds the editable fields of one stop. Changing any field rebuilds the
    stop (keeping its id) and emits an ``UPDATED_STOP`` event; the navigation
    and command methods emit their own events. Whoever owns the gradient
    subscribes and applies them.
    """

    def __init__(self, stop: ColorStop) -> None:
        self._listeners: List[StopEditorListener] = []
        self._id = stop.id
        self._position = stop.position
        self._first_color: ColorRGBA = presets.RED
        self._second_color: ColorRGBA = presets.BLUE
        self._is_single = True
        self.can_delete = True
        self._load(stop)

    # ------------------ LISTENERS ------------------
    def subscribe(self, listener: StopEditorListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _emit(self, action: StopEditorAction, stop: Optional[ColorStop] = None) -> None:
        event = StopEditorEvent(action, stop)
        for listener in list(self._listeners):
            listener(event)

    # ------------------ FIELDS ------------------
    @property
    def stop_id(self) -> str:
        return self._id

    @property
    def is_single(self) -> bool:
        return self._is_single

    @is_single.setter
    def is_single(self, value: bool) -> None:
        self._is_single = bool(value)
        self._send_updated_stop()

    @property
    def first_color(self) -> ColorRGBA:
        return self._first_color

    @first_color.setter
    def first_color(self, value: ColorRGBA) -> None:
        self._first_color = ColorRGBA(value)
        self._send_updated_stop()

    @property
    def second_color(self) -> ColorRGBA:
        return self._second_color

    @second_color.setter
    def second_color(self, value: ColorRGBA) -> None:
        self._second_color = ColorRGBA(value)
        self._send_updated_stop()

    @property
    def position(self) -> float:
        return self._position

    @position.setter
    def position(self, value: float) -> None:
        self._position = float(value)
        self._send_updated_stop()

    @property
    def color_stop(self) -> ColorStop:
        """The stop as currently described by the fields."""
        if self._is_single:
            stop_type = Single(self._first_color)
        else:
            stop_type = Dual(self._first_color, self._second_color)
        return ColorStop(position=self._position, type=stop_type, id=self._id)

    def _send_updated_stop(self) -> None:
        self._emit(StopEditorAction.UPDATED_STOP, self.color_stop)

    def _load(self, stop: ColorStop) -> None:
        self._id = stop.id
        self._position = stop.position
        if isinstance(stop.type, Dual):
            self._is_single = False
            self._first_color = stop.type.color_a
            self._second_color = stop.type.color_b
        else:
            self._is_single = True
            self._first_color = stop.type.start_color

    def change(self, stop: ColorStop) -> None:
        """Show another stop without emitting an update."""
        logger.debug("Inspector now editing stop %s", stop.id)
        self._load(stop)

    # ------------------ COMMANDS ------------------
    def prev(self) -> None:
        self._emit(StopEditorAction.PREV)

    def next(self) -> None:
        self._emit(StopEditorAction.NEXT)

    def delete(self) -> None:
        self._emit(StopEditorAction.DELETE)

    def duplicate(self) -> None:
        self._emit(StopEditorAction.DUPLICATE)

    def close(self) -> None:
        self._emit(StopEditorAction.CLOSE)
