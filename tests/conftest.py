import pytest

from gradient_editor.colors import presets
from gradient_editor.models import ColorMap, ColorStop, Dual, GradientColorScheme, Single


@pytest.fixture
def red_blue_map():
    return ColorMap([
        ColorStop(0.0, Single(presets.RED), id="RED"),
        ColorStop(1.0, Single(presets.BLUE), id="BLUE"),
    ], id="MAP")


@pytest.fixture
def hard_edge_map():
    return ColorMap([
        ColorStop(0.0, Single(presets.RED), id="A"),
        ColorStop(0.5, Dual(presets.RED, presets.BLUE), id="EDGE"),
        ColorStop(1.0, Single(presets.BLUE), id="B"),
    ], id="EDGE_MAP")


@pytest.fixture
def red_blue_scheme(red_blue_map):
    return GradientColorScheme("Red Blue", "Two stops", red_blue_map, id="SCHEME")
