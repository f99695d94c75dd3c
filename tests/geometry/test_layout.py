import numpy as np
import pytest

from gradient_editor.geometry import GradientLayoutGeometry, Orientation, Rect, Size


TALL = (100, 400)
WIDE = (300, 100)


def test_square_and_tall_views_are_vertical():
    assert GradientLayoutGeometry((200, 200)).orientation is Orientation.VERTICAL
    assert GradientLayoutGeometry(TALL).is_vertical

def test_wide_view_is_horizontal():
    geometry = GradientLayoutGeometry(WIDE)
    assert geometry.orientation is Orientation.HORIZONTAL
    assert geometry.strip_length == 300.0

def test_strip_length_never_below_one():
    assert GradientLayoutGeometry((0, 0)).strip_length == 1.0
    assert GradientLayoutGeometry((0, 0)).view_coordinate(1.0) == 1.0

def test_gradient_strip_frame():
    assert GradientLayoutGeometry(TALL).gradient_strip_frame == Rect(0.0, 0.0, 100.0, 400.0)
    assert GradientLayoutGeometry(WIDE).gradient_strip_frame == Rect(0.0, 0.0, 300.0, 100.0)

def test_unzoomed_range_ignores_pan():
    geometry = GradientLayoutGeometry(TALL, zoom_level=1.0, pan_offset=0.7)
    assert geometry.visible_range == (0.0, 1.0)
    assert geometry.max_pan == 0.0

@pytest.mark.parametrize("zoom,pan,expected", [
    (2.0, 0.0, (0.0, 0.5)),
    (2.0, 1.0, (0.5, 1.0)),
    (2.0, 0.5, (0.25, 0.75)),
    (4.0, 0.0, (0.0, 0.25)),
    (4.0, 1.0, (0.75, 1.0)),
])
def test_visible_range(zoom, pan, expected):
    geometry = GradientLayoutGeometry(TALL, zoom_level=zoom, pan_offset=pan)
    assert geometry.visible_range == pytest.approx(expected)

def test_visible_length_scales_with_zoom():
    assert GradientLayoutGeometry(TALL, zoom_level=2.0).visible_length == 200.0
    assert GradientLayoutGeometry(TALL, zoom_level=4.0).visible_length == 100.0

def test_zoom_is_clamped():
    assert GradientLayoutGeometry(TALL, zoom_level=10.0).zoom_level == 4.0
    assert GradientLayoutGeometry(TALL, zoom_level=0.5).zoom_level == 1.0

def test_round_trip_at_zoom_one():
    geometry = GradientLayoutGeometry(TALL)
    for p in np.linspace(0.0, 1.0, 21):
        coord = geometry.view_coordinate(p)
        assert coord is not None
        assert geometry.gradient_position(coord) == pytest.approx(p)

def test_round_trip_when_zoomed():
    geometry = GradientLayoutGeometry(WIDE, zoom_level=3.0, pan_offset=0.4)
    start, end = geometry.visible_range
    for p in np.linspace(start, end, 11):
        assert geometry.gradient_position(geometry.view_coordinate(p)) == pytest.approx(p)

def test_view_coordinate_at_zoom_four():
    geometry = GradientLayoutGeometry(TALL, zoom_level=4.0)
    assert geometry.view_coordinate(0.0) == 0.0
    assert geometry.view_coordinate(0.125) == pytest.approx(200.0)
    assert geometry.view_coordinate(0.25) == pytest.approx(400.0)

def test_hidden_positions_have_no_coordinate():
    geometry = GradientLayoutGeometry(TALL, zoom_level=4.0)
    assert geometry.view_coordinate(0.3) is None
    assert not geometry.contains(0.3)
    assert geometry.contains(0.25)
    assert geometry.handle_offset(0.9) is None

def test_gradient_position_is_clamped_to_unit_range():
    geometry = GradientLayoutGeometry(TALL)
    assert geometry.gradient_position(-50.0) == 0.0
    assert geometry.gradient_position(1000.0) == 1.0

def test_zoomed_gradient_position_can_leave_window():
    geometry = GradientLayoutGeometry(TALL, zoom_level=4.0)
    # dragging past the strip end lands beyond the window, not on its edge
    assert geometry.gradient_position(800.0) == pytest.approx(0.5)

def test_handle_offset_vertical():
    geometry = GradientLayoutGeometry(TALL)
    assert geometry.handle_offset(0.5) == Size(100.0, 200.0)

def test_handle_offset_horizontal():
    geometry = GradientLayoutGeometry(WIDE)
    assert geometry.handle_offset(0.5) == Size(150.0, 0.0)

def test_custom_strip_width():
    geometry = GradientLayoutGeometry(TALL, strip_width=40.0)
    assert geometry.handle_offset(0.0) == Size(40.0, 0.0)
    assert geometry.gradient_strip_frame.width == 40.0

def test_vectorized_view_coordinates():
    geometry = GradientLayoutGeometry(TALL, zoom_level=4.0)
    coords = geometry.view_coordinates([0.0, 0.125, 0.5])
    np.testing.assert_allclose(coords[:2], [0.0, 200.0])
    assert np.isnan(coords[2])

def test_vectorized_gradient_positions_match_scalar():
    geometry = GradientLayoutGeometry(WIDE, zoom_level=2.5, pan_offset=0.3)
    coords = np.array([-10.0, 0.0, 75.0, 150.0, 299.0, 500.0])
    expected = [geometry.gradient_position(c) for c in coords]
    np.testing.assert_allclose(geometry.gradient_positions(coords), expected)
