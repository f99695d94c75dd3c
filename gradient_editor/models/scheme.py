from __future__ import annotations
from typing import List, Optional, Union
from ..defaults import JSON_INDENT, value_or_default
from .color_map import ColorMap
from .color_stop import new_id
from ..value_base import FrozenValue


class GradientColorScheme(FrozenValue):
    """
    A named gradient: a :class:`ColorMap` plus a display name and description.

    Schemes compare equal by ``id`` and sort by ``name``.

    Args:
        name: Display name.
        description: What the scheme looks like or is meant for.
        color_map: The gradient itself.
        id: Identifier; a fresh UUID string when omitted.
    """
    __slots__ = ('id', 'name', 'description', 'color_map')

    def __init__(self, name: str, description: str, color_map: ColorMap, id: Optional[str] = None) -> None:
        self.id = id if id is not None else new_id()
        self.name = name
        self.description = description
        self.color_map = color_map
        self._freeze()

    def with_metadata(self, name: str, description: str) -> GradientColorScheme:
        return GradientColorScheme(name, description, self.color_map, id=self.id)

    def with_color_map(self, color_map: ColorMap) -> GradientColorScheme:
        return GradientColorScheme(self.name, self.description, color_map, id=self.id)

    @classmethod
    def all_presets(cls) -> List[GradientColorScheme]:
        """The built-in schemes, in display order."""
        from .presets import ALL_SCHEMES
        return list(ALL_SCHEMES)

    # ------------------ JSON ------------------
    def to_json(self, indent: Optional[int] = None) -> str:
        """
        Serialize to pretty-printed JSON text.

        Raises:
            EncodeError: a color in the map cannot be represented
        """
        from ..serialization import dumps_scheme
        return dumps_scheme(self, indent=value_or_default(indent, JSON_INDENT))

    @classmethod
    def from_json(cls, data: Union[str, bytes, bytearray]) -> GradientColorScheme:
        """
        Parse a scheme from JSON text.

        Raises:
            DecodeError: the payload is malformed
        """
        from ..serialization import loads_scheme
        return loads_scheme(data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GradientColorScheme):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: GradientColorScheme) -> bool:
        return self.name < other.name

    def __repr__(self) -> str:
        return f"GradientColorScheme(name={self.name!r}, id={self.id!r})"
