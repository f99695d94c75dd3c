import pytest

from gradient_editor.colors import presets
from gradient_editor.geometry import GradientLayoutGeometry
from gradient_editor.gradients import interpolated_color, project_color_map, project_stops
from gradient_editor.models import ColorMap, ColorStop, GradientColorScheme, RenderStop, Single


TALL = (100, 400)


def test_minimal_gradient_unzoomed(red_blue_map):
    geometry = GradientLayoutGeometry(TALL)
    assert project_color_map(red_blue_map, geometry) == [
        RenderStop(presets.RED, 0.0),
        RenderStop(presets.BLUE, 1.0),
    ]

def test_dual_stop_gives_two_breakpoints_at_same_location(hard_edge_map):
    geometry = GradientLayoutGeometry(TALL, zoom_level=2.0, pan_offset=0.5)
    assert project_color_map(hard_edge_map, geometry) == [
        RenderStop(presets.RED, 0.0),
        RenderStop(presets.RED, 0.5),
        RenderStop(presets.BLUE, 0.5),
        RenderStop(presets.BLUE, 1.0),
    ]

def test_window_without_stops_is_flat():
    cmap = ColorMap([
        ColorStop(0.3, Single(presets.RED)),
        ColorStop(0.9, Single(presets.BLUE)),
    ])
    geometry = GradientLayoutGeometry(TALL, zoom_level=4.0, pan_offset=0.0)
    assert geometry.visible_range == (0.0, 0.25)
    assert project_color_map(cmap, geometry) == [
        RenderStop(presets.RED, 0.0),
        RenderStop(presets.RED, 1.0),
    ]

def test_window_between_stops_interpolates_both_edges(red_blue_map):
    geometry = GradientLayoutGeometry(TALL, zoom_level=4.0, pan_offset=0.5)
    start, end = geometry.visible_range
    stops = red_blue_map.sorted_stops()
    assert project_color_map(red_blue_map, geometry) == [
        RenderStop(interpolated_color(stops, start), 0.0),
        RenderStop(interpolated_color(stops, end), 1.0),
    ]

def test_edge_breakpoints_added_only_when_needed():
    stops = [
        ColorStop(0.0, Single(presets.RED)),
        ColorStop(0.1, Single(presets.GREEN)),
        ColorStop(1.0, Single(presets.BLUE)),
    ]
    projected = project_stops(stops, 0.0, 0.5)
    assert [rs.location for rs in projected] == pytest.approx([0.0, 0.2, 1.0])
    assert projected[0].color == presets.RED
    assert projected[-1].color == interpolated_color(stops, 0.5)

    projected = project_stops(stops, 0.05, 0.55)
    assert len(projected) == 3
    assert projected[0].location == 0.0
    assert projected[1].location == pytest.approx(0.1)

def test_window_edge_on_a_stop():
    stops = [ColorStop(0.25, Single(presets.RED)), ColorStop(0.5, Single(presets.BLUE))]
    assert project_stops(stops, 0.25, 0.5) == [
        RenderStop(presets.RED, 0.0),
        RenderStop(presets.BLUE, 1.0),
    ]

def test_unsorted_map_is_sorted_first():
    cmap = ColorMap([
        ColorStop(1.0, Single(presets.BLUE)),
        ColorStop(0.0, Single(presets.RED)),
    ])
    projected = project_color_map(cmap, GradientLayoutGeometry(TALL))
    assert [rs.color for rs in projected] == [presets.RED, presets.BLUE]

@pytest.mark.parametrize("zoom,pan", [(1.0, 0.0), (1.5, 0.2), (2.0, 1.0), (4.0, 0.33), (4.0, 0.9)])
def test_preset_projections_are_ordered(zoom, pan):
    geometry = GradientLayoutGeometry(TALL, zoom_level=zoom, pan_offset=pan)
    for scheme in GradientColorScheme.all_presets():
        locations = [rs.location for rs in project_color_map(scheme.color_map, geometry)]
        assert len(locations) >= 2
        assert locations == sorted(locations)
        assert locations[0] == 0.0
        assert locations[-1] == 1.0
