from __future__ import annotations
from typing import Optional
import uuid
from ..colors import presets
from .color_stop_type import ColorStopType, Single
from ..value_base import FrozenValue


def new_id() -> str:
    """Fresh opaque identifier (uppercase UUID4 string)."""
    return str(uuid.uuid4()).upper()


class ColorStop(FrozenValue):
    """
    One breakpoint of a gradient.

    Identity and ordering are deliberately split: two stops are equal (and
    hash alike) when their ``id`` matches, whatever their position or colors,
    while ``<``/``>`` compare ``position`` only. This lets an editor keep
    tracking "the same" stop while it is dragged around.

    ``position`` is nominally in [0, 1] but is not validated; callers clamp.
    """
    __slots__ = ('id', 'position', 'type')

    def __init__(self, position: float = 0.0, type: Optional[ColorStopType] = None, id: Optional[str] = None) -> None:
        if type is None:
            raise TypeError("ColorStop requires a color stop type")
        self.id = id if id is not None else new_id()
        self.position = float(position)
        self.type = type
        self._freeze()

    @classmethod
    def create(cls, position: float, color_spec: ColorStopType, id: Optional[str] = None) -> ColorStop:
        return cls(position=position, type=color_spec, id=id)

    @staticmethod
    def compare(a: ColorStop, b: ColorStop) -> int:
        """Three-way comparison on position: -1, 0 or 1."""
        return (a.position > b.position) - (a.position < b.position)

    # ------------------ COPIES ------------------
    def with_position(self, position: float) -> ColorStop:
        return ColorStop(position=position, type=self.type, id=self.id)

    def with_type(self, type: ColorStopType) -> ColorStop:
        return ColorStop(position=self.position, type=type, id=self.id)

    # ------------------ PRESETS ------------------
    @classmethod
    def default_start(cls) -> ColorStop:
        """Starting stop used when nothing has been defined."""
        return cls(position=0.0, type=Single(presets.RED))

    @classmethod
    def default_end(cls) -> ColorStop:
        """Ending stop used when nothing has been defined."""
        return cls(position=1.0, type=Single(presets.BLUE))

    # ------------------ IDENTITY / ORDER ------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorStop):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: ColorStop) -> bool:
        return self.position < other.position

    def __le__(self, other: ColorStop) -> bool:
        return self.position <= other.position

    def __gt__(self, other: ColorStop) -> bool:
        return self.position > other.position

    def __ge__(self, other: ColorStop) -> bool:
        return self.position >= other.position

    def __repr__(self) -> str:
        return f"ColorStop(position={self.position!r}, type={self.type!r}, id={self.id!r})"
