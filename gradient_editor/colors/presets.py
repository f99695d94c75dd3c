from .color import ColorRGBA

# BASIC
BLACK = ColorRGBA.from_ints(0, 0, 0)
WHITE = ColorRGBA.from_ints(255, 255, 255)
RED = ColorRGBA.from_ints(255, 0, 0)
GREEN = ColorRGBA.from_ints(0, 255, 0)
BLUE = ColorRGBA.from_ints(0, 0, 255)
CYAN = ColorRGBA.from_ints(0, 255, 255)
ORANGE = ColorRGBA.from_ints(255, 165, 0)
YELLOW = ColorRGBA.from_ints(255, 255, 0)
PURPLE = ColorRGBA.from_ints(128, 0, 128)

# Fully transparent, returned when there is nothing to interpolate.
CLEAR = ColorRGBA((0.0, 0.0, 0.0, 0.0))

# TOPOGRAPHIC
TOPO_BLUE = ColorRGBA.from_ints(220, 220, 254)
TOPO_GREEN = ColorRGBA.from_ints(238, 249, 217)
TOPO_BROWN = ColorRGBA.from_ints(167, 141, 112)

NAMED_COLORS = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "cyan": CYAN,
    "orange": ORANGE,
    "yellow": YELLOW,
    "purple": PURPLE,
    "clear": CLEAR,
    "topo_blue": TOPO_BLUE,
    "topo_green": TOPO_GREEN,
    "topo_brown": TOPO_BROWN,
}
