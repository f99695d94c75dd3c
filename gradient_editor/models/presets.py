"""
Built-in color maps and the schemes that wrap them.
"""
from ..colors import presets as colors
from ..colors.color import ColorRGBA
from .color_map import ColorMap
from .color_stop import ColorStop
from .color_stop_type import Dual, Single
from .scheme import GradientColorScheme

_rgb = ColorRGBA.from_ints


def _single(position: float, color: ColorRGBA) -> ColorStop:
    return ColorStop.create(position, Single(color))


def _dual(position: float, below: ColorRGBA, above: ColorRGBA) -> ColorStop:
    return ColorStop.create(position, Dual(below, above))


def _topographic_stops():
    # Thin brown contour lines every 0.05 from 0.30, the first one rising out of blue water.
    stops = []
    for i in range(14):
        base = round(0.30 + 0.05 * i, 3)
        below = colors.TOPO_BLUE if i == 0 else colors.TOPO_GREEN
        stops.append(_dual(base, below, colors.TOPO_BROWN))
        stops.append(_dual(round(base + 0.005, 3), colors.TOPO_BROWN, colors.TOPO_GREEN))
    return stops


BLACK_AND_WHITE = ColorMap.create([
    _single(0.0, colors.BLACK),
    _single(1.0, colors.WHITE),
])

WAKE_ISLAND = ColorMap.create([
    _single(0.20, _rgb(9, 33, 79)),
    _single(0.40, _rgb(15, 48, 88)),
    _single(0.50, _rgb(45, 110, 148)),
    _dual(0.52, _rgb(224, 240, 251), _rgb(176, 151, 132)),
    _dual(0.70, _rgb(230, 203, 185), _rgb(66, 82, 68)),
    _single(0.85, _rgb(64, 70, 64)),
    _single(1.00, _rgb(98, 101, 89)),
])

NEON_RIPPLES = ColorMap.create([
    _single(0.32, colors.BLACK),
    _single(0.33, colors.CYAN),
    _single(0.34, colors.BLACK),
    _single(0.65, colors.BLACK),
    _single(0.66, colors.CYAN),
    _single(0.67, colors.BLACK),
])

_DARK_GREEN = ColorRGBA((0.0, 0.1, 0.0, 1.0))

APPLE_TWO_RIVER = ColorMap.create([
    _single(0.32, colors.BLACK),
    _single(0.33, colors.GREEN),
    _single(0.34, _DARK_GREEN),
    _single(0.65, _DARK_GREEN),
    _single(0.66, colors.GREEN),
    _single(0.67, colors.BLACK),
])

_DEEP_PURPLE = _rgb(33, 0, 51)

ELECTORAL_MAP = ColorMap.create([
    _single(0.32, ColorRGBA((0.1, 0.0, 0.0, 1.0))),
    _single(0.33, colors.RED),
    _single(0.34, _DEEP_PURPLE),
    _single(0.65, _DEEP_PURPLE),
    _single(0.66, colors.BLUE),
    _single(0.67, ColorRGBA((0.0, 0.0, 0.15, 1.0))),
])

TOPOGRAPHIC = ColorMap.create(_topographic_stops())


BLACK_AND_WHITE_SCHEME = GradientColorScheme(
    name="Black & White",
    description="A simple, black-and-white color scheme that is good for input into filter effects.",
    color_map=BLACK_AND_WHITE,
)

WAKE_ISLAND_SCHEME = GradientColorScheme(
    name="Wake Island",
    description="A tropical island color scheme sampled from photos of Wake Island.",
    color_map=WAKE_ISLAND,
)

NEON_RIPPLES_SCHEME = GradientColorScheme(
    name="Neon Ripples",
    description="An abstract color set of snaking lines.",
    color_map=NEON_RIPPLES,
)

APPLE_TWO_RIVER_SCHEME = GradientColorScheme(
    name="Apple ][ River",
    description="Inspired by the green CRT monitor that came with the Apple ][ computer.",
    color_map=APPLE_TWO_RIVER,
)

ELECTORAL_MAP_SCHEME = GradientColorScheme(
    name="Electoral Map",
    description="Red vs. Blue",
    color_map=ELECTORAL_MAP,
)

TOPOGRAPHIC_SCHEME = GradientColorScheme(
    name="Topographic",
    description="Resembles a topographic map.",
    color_map=TOPOGRAPHIC,
)

ALL_SCHEMES = (
    BLACK_AND_WHITE_SCHEME,
    WAKE_ISLAND_SCHEME,
    NEON_RIPPLES_SCHEME,
    APPLE_TWO_RIVER_SCHEME,
    ELECTORAL_MAP_SCHEME,
    TOPOGRAPHIC_SCHEME,
)
