"""
Gradient Editor Colors
======================

Immutable RGBA colors with float components and the named presets used by
the built-in gradient schemes.

Usage
-----
>>> from gradient_editor.colors import ColorRGBA, presets
>>>
>>> teal = ColorRGBA.from_ints(0, 128, 128)
>>> teal.alpha
1.0
>>> presets.RED.lerp(presets.BLUE, 0.5).value
(0.5, 0.0, 0.5, 1.0)
"""

from .color import ColorRGBA
from . import presets
from .presets import NAMED_COLORS

__all__ = [
    "ColorRGBA",
    "presets",
    "NAMED_COLORS",
]
