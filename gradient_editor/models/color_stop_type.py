from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Tuple
from ..colors.color import ColorRGBA
from ..errors import DecodeError
from ..types.color_types import ColorLike, StopEncoding
from ..value_base import FrozenValue


class ColorStopType(FrozenValue, ABC):
    """
    The color payload of a stop: either one color or a hard two-color edge.

    Exactly two shapes exist, :class:`Single` and :class:`Dual`. Use
    ``isinstance`` to tell them apart.
    """
    __slots__ = ()

    title: ClassVar[str]
    encoding_name: ClassVar[StopEncoding]

    @property
    @abstractmethod
    def start_color(self) -> ColorRGBA:
        """Color seen when arriving at the stop from lower positions."""

    @property
    @abstractmethod
    def end_color(self) -> ColorRGBA:
        """Color seen when leaving the stop toward higher positions."""

    @property
    @abstractmethod
    def colors(self) -> Tuple[ColorRGBA, ...]:
        """The one or two colors of this stop, in paint order."""

    @property
    def is_single(self) -> bool:
        return isinstance(self, Single)

    @staticmethod
    def from_encoding(
        encoding_name: str,
        first_color: ColorRGBA,
        second_color: Optional[ColorRGBA] = None,
    ) -> ColorStopType:
        """
        Build a stop type from its wire representation.

        Args:
            encoding_name: ``"single"`` or ``"dual"``
            first_color: The first (or only) color
            second_color: The second color, required for ``"dual"``

        Returns:
            Single or Dual

        Raises:
            DecodeError: unknown encoding name, or ``"dual"`` without a second color
        """
        if encoding_name == Single.encoding_name:
            return Single(first_color)
        if encoding_name == Dual.encoding_name:
            if second_color is None:
                raise DecodeError("dual color stop is missing its second color", path="secondColor")
            return Dual(first_color, second_color)
        raise DecodeError(f"unknown color stop type {encoding_name!r}", path="type")


class Single(ColorStopType):
    __slots__ = ('color',)
    title: ClassVar[str] = "Single"
    encoding_name: ClassVar[StopEncoding] = "single"

    def __init__(self, color: ColorLike) -> None:
        self.color = ColorRGBA(color)
        self._freeze()

    @property
    def start_color(self) -> ColorRGBA:
        return self.color

    @property
    def end_color(self) -> ColorRGBA:
        return self.color

    @property
    def colors(self) -> Tuple[ColorRGBA, ...]:
        return (self.color,)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Single):
            return self.color == other.color
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.encoding_name, self.color))

    def __repr__(self) -> str:
        return f"Single({self.color!r})"


class Dual(ColorStopType):
    """Hard transition: ``color_a`` below the stop, ``color_b`` above it."""
    __slots__ = ('color_a', 'color_b')
    title: ClassVar[str] = "Dual"
    encoding_name: ClassVar[StopEncoding] = "dual"

    def __init__(self, color_a: ColorLike, color_b: ColorLike) -> None:
        self.color_a = ColorRGBA(color_a)
        self.color_b = ColorRGBA(color_b)
        self._freeze()

    @property
    def start_color(self) -> ColorRGBA:
        return self.color_a

    @property
    def end_color(self) -> ColorRGBA:
        return self.color_b

    @property
    def colors(self) -> Tuple[ColorRGBA, ...]:
        return (self.color_a, self.color_b)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Dual):
            return self.color_a == other.color_a and self.color_b == other.color_b
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.encoding_name, self.color_a, self.color_b))

    def __repr__(self) -> str:
        return f"Dual({self.color_a!r}, {self.color_b!r})"
