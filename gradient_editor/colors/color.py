from __future__ import annotations
from typing import Tuple, Iterator
import math
import numpy as np
from numpy import ndarray
from ..types.color_types import ColorLike, ColorTuple, Scalar, element_to_array
from ..value_base import FrozenValue


class ColorRGBA(FrozenValue):
    """
    Immutable RGBA color with float components in [0, 1].

    Components are stored exactly as given (no clamping, no quantization) so a
    color survives a JSON round-trip bit for bit. There is no color-space
    tagging; interpolation is a plain per-channel lerp.

    Args:
        value: 3 or 4 components. Alpha defaults to 1.0 when omitted.
    """
    __slots__ = ('_value',)

    def __init__(self, value: ColorLike) -> None:
        if isinstance(value, ColorRGBA):
            value = value.value
        arr = element_to_array(value)
        if arr.ndim != 1 or arr.shape[0] not in (3, 4):
            raise ValueError(f"ColorRGBA expects 3 or 4 components, got shape {arr.shape}")
        components = tuple(float(v) for v in arr)
        if len(components) == 3:
            components = components + (1.0,)
        self._value = components
        self._freeze()

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_ints(cls, red: int, green: int, blue: int, alpha: int = 255) -> ColorRGBA:
        """Create from 0-255 integer components."""
        return cls((red / 255, green / 255, blue / 255, alpha / 255))

    @classmethod
    def gray(cls, level: Scalar, alpha: Scalar = 1.0) -> ColorRGBA:
        return cls((level, level, level, alpha))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorTuple:
        return self._value

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def is_finite(self) -> bool:
        """True when every component is a finite number."""
        return all(math.isfinite(v) for v in self._value)

    # ------------------ OPERATIONS ------------------
    def lerp(self, other: ColorRGBA, t: float) -> ColorRGBA:
        """Linear interpolation toward ``other``, channel by channel. ``t`` is not clamped."""
        return ColorRGBA(tuple(a + (b - a) * t for a, b in zip(self._value, other.value)))

    def with_alpha(self, alpha: Scalar) -> ColorRGBA:
        return ColorRGBA(self._value[:3] + (float(alpha),))

    def to_tuple(self) -> ColorTuple:
        return self._value

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=np.float64)

    def to_ints(self) -> Tuple[int, int, int, int]:
        """Round each component to 0-255."""
        return tuple(int(round(max(0.0, min(1.0, v)) * 255)) for v in self._value)  # type: ignore[return-value]

    def to_hex(self) -> str:
        r, g, b, a = self.to_ints()
        if a == 255:
            return f"#{r:02x}{g:02x}{b:02x}"
        return f"#{r:02x}{g:02x}{b:02x}{a:02x}"

    # ------------------ DUNDER ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return 4

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorRGBA):
            return self._value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"ColorRGBA(red={r!r}, green={g!r}, blue={b!r}, alpha={a!r})"
