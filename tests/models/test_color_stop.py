import pytest

from gradient_editor.colors import presets
from gradient_editor.errors import DecodeError
from gradient_editor.models import ColorStop, ColorStopType, Dual, Single, new_id


def test_single_colors():
    single = Single(presets.RED)
    assert single.start_color == presets.RED
    assert single.end_color == presets.RED
    assert single.colors == (presets.RED,)
    assert single.is_single
    assert single.encoding_name == "single"

def test_dual_colors_in_order():
    dual = Dual(presets.RED, presets.BLUE)
    assert dual.start_color == presets.RED
    assert dual.end_color == presets.BLUE
    assert dual.colors == (presets.RED, presets.BLUE)
    assert not dual.is_single
    assert dual.encoding_name == "dual"

def test_stop_type_value_equality():
    assert Single(presets.RED) == Single(presets.RED)
    assert Dual(presets.RED, presets.BLUE) != Dual(presets.BLUE, presets.RED)
    assert Single(presets.RED) != Dual(presets.RED, presets.RED)

def test_from_encoding():
    assert ColorStopType.from_encoding("single", presets.RED) == Single(presets.RED)
    assert ColorStopType.from_encoding("dual", presets.RED, presets.BLUE) == Dual(presets.RED, presets.BLUE)

def test_from_encoding_dual_without_second_color():
    with pytest.raises(DecodeError, match="second color") as excinfo:
        ColorStopType.from_encoding("dual", presets.RED)
    assert excinfo.value.path == "secondColor"

def test_from_encoding_unknown_type():
    with pytest.raises(DecodeError, match="unknown color stop type") as excinfo:
        ColorStopType.from_encoding("triple", presets.RED)
    assert excinfo.value.path == "type"

def test_new_id_is_unique_uppercase():
    a, b = new_id(), new_id()
    assert a != b
    assert a == a.upper()
    assert len(a) == 36

def test_stop_requires_type():
    with pytest.raises(TypeError):
        ColorStop(0.5)

def test_stop_gets_fresh_id():
    a = ColorStop(0.5, Single(presets.RED))
    b = ColorStop(0.5, Single(presets.RED))
    assert a.id != b.id

def test_stop_equality_is_by_id():
    a = ColorStop(0.2, Single(presets.RED), id="SAME")
    b = ColorStop(0.8, Single(presets.BLUE), id="SAME")
    c = ColorStop(0.2, Single(presets.RED))
    assert a == b
    assert hash(a) == hash(b)
    assert a != c

def test_stop_ordering_is_by_position():
    low = ColorStop(0.1, Single(presets.RED))
    high = ColorStop(0.9, Single(presets.RED))
    assert low < high
    assert high > low
    assert low <= ColorStop(0.1, Single(presets.BLUE))
    assert ColorStop.compare(low, high) == -1
    assert ColorStop.compare(high, low) == 1
    assert ColorStop.compare(low, ColorStop(0.1, Single(presets.BLUE))) == 0

def test_with_position_keeps_id_and_type():
    stop = ColorStop(0.2, Dual(presets.RED, presets.BLUE))
    moved = stop.with_position(0.7)
    assert moved.id == stop.id
    assert moved.type == stop.type
    assert moved.position == 0.7
    assert stop.position == 0.2

def test_with_type_keeps_id_and_position():
    stop = ColorStop(0.2, Single(presets.RED))
    changed = stop.with_type(Single(presets.GREEN))
    assert changed.id == stop.id
    assert changed.position == 0.2
    assert changed.type == Single(presets.GREEN)

def test_stop_is_immutable():
    stop = ColorStop(0.2, Single(presets.RED))
    with pytest.raises(AttributeError):
        stop.position = 0.4

def test_position_is_not_range_checked():
    assert ColorStop(1.5, Single(presets.RED)).position == 1.5

def test_default_stops():
    start = ColorStop.default_start()
    end = ColorStop.default_end()
    assert (start.position, start.type) == (0.0, Single(presets.RED))
    assert (end.position, end.type) == (1.0, Single(presets.BLUE))
