"""
Unit tests for SelectionState (pointer updates, hue memory, listeners)
"""

import pytest

from huewheel.core import (
    HSBa,
    HueSaturationObserver,
    RGBa,
    SelectionState,
    WheelConfig,
    WheelGeometry,
    hsb_to_rgb,
)


class RecordingObserver(HueSaturationObserver):
    def __init__(self, log: list):
        self.log = log

    def on_hue_saturation_selected(self, hue: float, saturation: float) -> None:
        self.log.append(("observer", hue, saturation))


def _geo() -> WheelGeometry:
    # disc area (15, 15)-(115, 115), raster radius 50
    return WheelGeometry((65.0, 65.0), 50.0, 1.0, origin=(15.0, 15.0), margin=15.0)


@pytest.fixture
def state() -> SelectionState:
    return SelectionState(_geo())


def test_initial_color_is_white(state):
    assert state.color == HSBa(0.0, 0.0, 1.0, 1.0)
    assert state.indicator.point == pytest.approx((65.0, 65.0))
    assert state.indicator.radius == 8.0
    assert state.indicator.last_remembered_hue == 0.0


def test_update_from_pointer_maps_to_hue_and_saturation(state):
    color = state.update_from_pointer((90.0, 65.0))
    assert (color.h, color.s) == pytest.approx((0.0, 0.5))
    assert (color.b, color.a) == (1.0, 1.0)

    color = state.update_from_pointer((65.0, 90.0))
    assert (color.h, color.s) == pytest.approx((0.25, 0.5))
    assert state.indicator.point == (65.0, 90.0)


def test_update_from_pointer_outside_clamps_to_rim(state):
    color = state.update_from_pointer((400.0, 65.0))
    assert color.s == 1.0
    assert state.indicator.point == pytest.approx((115.0, 65.0))


def test_update_from_pointer_scaled():
    geo = WheelGeometry((65.0, 65.0), 50.0, 2.0, origin=(15.0, 15.0))
    state = SelectionState(geo)
    color = state.update_from_pointer((65.0, 40.0))
    assert (color.h, color.s) == pytest.approx((0.75, 0.5))


def test_update_from_pointer_at_center(state):
    state.set_color(HSBa(0.3, 0.0, 1.0, 1.0))
    assert state.indicator.last_remembered_hue == 0.3

    color = state.update_from_pointer((66.0, 64.0))
    assert (color.h, color.s) == (0.0, 0.0)
    assert state.indicator.point == (65.0, 65.0)
    assert state.indicator.last_remembered_hue == 0.3


def test_hue_memory_through_set_saturation():
    state = SelectionState(_geo(), HSBa(0.5, 0.8, 1.0, 1.0))

    gray = state.set_saturation(0.0)
    assert gray.s == 0.0
    assert gray.h == 0.0
    assert state.indicator.last_remembered_hue == 0.5

    again = state.set_saturation(0.5)
    assert again.h == 0.5
    assert again.s == 0.5
    assert state.indicator.last_remembered_hue == 0.0


def test_hue_memory_through_set_color(state):
    state.set_color(HSBa(0.2, 0.6, 0.9, 1.0))
    state.set_color(HSBa(0.2, 0.0, 0.9, 1.0))
    restored = state.set_color(HSBa(0.0, 0.4, 0.9, 1.0))
    assert restored == HSBa(0.2, 0.4, 0.9, 1.0)
    assert state.indicator.last_remembered_hue == 0.0


def test_dragging_to_center_remembers_previous_hue(state):
    color = state.update_from_pointer((40.0, 65.0))
    assert (color.h, color.s) == pytest.approx((0.5, 0.5))

    gray = state.update_from_pointer((65.0, 65.0))
    assert (gray.h, gray.s) == (0.0, 0.0)
    assert state.indicator.last_remembered_hue == pytest.approx(0.5)

    restored = state.set_saturation(0.5)
    assert restored.h == pytest.approx(0.5)
    assert state.indicator.last_remembered_hue == 0.0


def test_hue_memory_restores_after_pointer_desaturation(state):
    state.update_from_pointer((65.0, 90.0))
    state.set_saturation(0.0)
    assert state.indicator.last_remembered_hue == pytest.approx(0.25)
    color = state.set_saturation(0.7)
    assert color.h == pytest.approx(0.25)


def test_set_saturation_keeps_brightness_and_moves_indicator(state):
    state.set_color(HSBa(0.25, 0.5, 0.4, 0.8))
    color = state.set_saturation(1.0)
    assert color == HSBa(0.25, 1.0, 0.4, 0.8)
    assert state.indicator.point == pytest.approx(_geo().point_at(0.25, 1.0))


def test_set_rgb_projects_onto_wheel(state):
    color = state.set_rgb(RGBa(0.0, 1.0, 0.0))
    assert color.h == pytest.approx(1 / 3)
    assert color.s == 1.0


def test_set_pressed_toggles_radius():
    state = SelectionState(_geo(), config=WheelConfig(indicator_radius=6.0, pressed_indicator_radius=9.0))
    state.set_pressed(True)
    assert state.current_indicator_geometry().radius == 9.0
    state.set_pressed(False)
    assert state.current_indicator_geometry().radius == 6.0


def test_indicator_geometry_fill_and_stroke(state):
    state.set_color(HSBa(2 / 3, 1.0, 1.0, 1.0))
    ind = state.current_indicator_geometry()
    assert ind.fill_color == hsb_to_rgb(state.color)
    assert ind.fill_color.to_rgba() == pytest.approx((0.0, 0.0, 1.0, 1.0))
    assert ind.stroke_color == RGBa(0.5, 0.5, 0.5, 1.0)
    assert ind.stroke_width == 1.0
    assert ind.point == state.indicator.point


def test_observer_and_callback_both_fire(state):
    calls = []
    state.add_callback(lambda h, s: calls.append(("callback", h, s)))
    state.add_observer(RecordingObserver(calls))

    state.update_from_pointer((90.0, 65.0))
    assert [c[0] for c in calls] == ["observer", "callback"]
    assert calls[0][1:] == pytest.approx((0.0, 0.5))
    assert calls[1][1:] == pytest.approx((0.0, 0.5))


def test_setters_do_not_notify(state):
    calls = []
    state.add_callback(lambda h, s: calls.append((h, s)))
    state.set_color(HSBa(0.1, 0.5, 1.0, 1.0))
    state.set_saturation(0.2)
    state.set_pressed(True)
    assert calls == []


def test_remove_listener(state):
    calls = []
    handle = state.add_callback(lambda h, s: calls.append((h, s)))
    assert state.remove_listener(handle) is True
    assert state.remove_listener(handle) is False
    state.update_from_pointer((90.0, 65.0))
    assert calls == []


def test_listener_type_checks(state):
    with pytest.raises(TypeError):
        state.add_observer(lambda h, s: None)
    with pytest.raises(TypeError):
        state.add_callback(42)


def test_set_geometry_replaces_indicator_point(state):
    state.set_color(HSBa(0.0, 1.0, 1.0, 1.0))
    bigger = WheelGeometry.for_control(330, 330, 2.0)
    state.set_geometry(bigger)
    assert state.geometry is bigger
    assert state.indicator.point == pytest.approx(bigger.point_at(0.0, 1.0))
