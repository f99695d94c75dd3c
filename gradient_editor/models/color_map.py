from __future__ import annotations
from typing import Iterable, List, NamedTuple, Optional, Tuple
from ..colors.color import ColorRGBA
from .color_stop import ColorStop, new_id
from ..value_base import FrozenValue


class RenderStop(NamedTuple):
    """A paint breakpoint: a color at a location in [0, 1] along the strip."""
    color: ColorRGBA
    location: float


def flatten_stops(stops: Iterable[ColorStop]) -> List[RenderStop]:
    """Expand stops into breakpoints; a Dual stop yields two at the same location."""
    return [
        RenderStop(color, stop.position)
        for stop in stops
        for color in stop.type.colors
    ]


class ColorMap(FrozenValue):
    """
    A gradient: an identified collection of :class:`ColorStop`.

    ``stops`` keeps the order the stops were given in and is never sorted, so
    edit lists stay stable (a duplicated stop shows up at the end). Anything
    that paints or walks the gradient should use :meth:`sorted_stops`.

    Two maps are equal when their ``id`` matches, regardless of their stops.

    Args:
        stops: Color stops in insertion order.
        id: Identifier; a fresh UUID string when omitted.

    Example:
        >>> from gradient_editor.colors import presets
        >>> from gradient_editor.models import ColorMap, ColorStop, Single
        >>> cmap = ColorMap.create([
        ...     ColorStop.create(1.0, Single(presets.BLUE)),
        ...     ColorStop.create(0.0, Single(presets.RED)),
        ... ])
        >>> [s.position for s in cmap.sorted_stops()]
        [0.0, 1.0]
    """
    __slots__ = ('id', 'stops')

    def __init__(self, stops: Iterable[ColorStop], id: Optional[str] = None) -> None:
        self.id = id if id is not None else new_id()
        self.stops: Tuple[ColorStop, ...] = tuple(stops)
        self._freeze()

    @classmethod
    def create(cls, stops: Iterable[ColorStop], id: Optional[str] = None) -> ColorMap:
        return cls(stops, id=id)

    def sorted_stops(self) -> List[ColorStop]:
        """Stops ordered by ascending position (stable for equal positions)."""
        return sorted(self.stops, key=lambda stop: stop.position)

    def with_stops(self, stops: Iterable[ColorStop]) -> ColorMap:
        """A new map with the same id and different stops."""
        return ColorMap(stops, id=self.id)

    def stop_with_id(self, stop_id: str) -> Optional[ColorStop]:
        return next((stop for stop in self.stops if stop.id == stop_id), None)

    def render_stops(self) -> List[RenderStop]:
        """Breakpoints for painting the whole map, ordered by location."""
        return flatten_stops(self.sorted_stops())

    def __len__(self) -> int:
        return len(self.stops)

    def __iter__(self):
        return iter(self.stops)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorMap):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"ColorMap(id={self.id!r}, stops={len(self.stops)})"
