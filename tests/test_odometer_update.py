from types import SimpleNamespace

import pytest

from odometer.constants import (
    CLASS_NEGATION_MARK,
    PROPERTY_DURATION,
    PROPERTY_PROGRESS,
    TAG_ANIMATING,
    TAG_ANIMATING_DOWN,
    TAG_ANIMATING_UP,
    TAG_BASE,
    TAG_THEME,
)
from odometer.errors import InvalidFormat
from odometer.events.bus import EVENT_TRANSITION_END
from odometer.odometer import Odometer
from odometer.rendering.surface import TextSurface
from tests.helpers import EventRecorder, drive, make_live_odometer


def test_construction_renders_static_value():
    bus, surface, odometer = make_live_odometer(value=1234567)

    assert surface.text == "1,234,567"
    assert {TAG_BASE, TAG_THEME} <= surface.tags
    assert surface.properties[PROPERTY_DURATION] == "2000ms"
    assert surface.odometer is odometer
    assert odometer.live
    assert not odometer.is_animating


def test_invalid_format_leaves_surface_untouched():
    surface = TextSurface("12")
    with pytest.raises(InvalidFormat):
        Odometer(surface, format="abc")
    assert surface.odometer is None
    assert surface.tokens == []
    assert surface.text == "12"


def test_update_sets_value_synchronously_and_animates():
    bus, surface, odometer = make_live_odometer(value=0)
    recorder = EventRecorder(surface)

    assert odometer.update(100) == 100
    assert odometer.value == 100
    assert odometer.is_animating
    assert {TAG_ANIMATING, TAG_ANIMATING_UP} <= surface.tags
    assert surface.properties[PROPERTY_PROGRESS] == "0.0000"
    # Ribbons already end on the new digits.
    assert surface.text == "100"

    drive(bus, 50)
    assert surface.properties[PROPERTY_PROGRESS] == "0.5000"
    drive(bus, 49)
    assert odometer.is_animating
    assert recorder.dones == []

    drive(bus, 1)
    assert not odometer.is_animating
    assert len(recorder.dones) == 1
    assert recorder.dones[0]["value"] == 100
    assert surface.text == "100"
    assert TAG_ANIMATING not in surface.tags
    assert all(token.is_static for token in surface.tokens)


def test_start_notification_payload():
    bus, surface, odometer = make_live_odometer(value=10, id="score")
    recorder = EventRecorder(surface)

    odometer.update(5)

    assert len(recorder.starts) == 1
    payload = recorder.starts[0]
    assert payload["value"] == 5
    assert payload["old_value"] == 10
    assert payload["id"] == "score"
    assert payload["instance"] is odometer
    assert payload["surface"] is surface
    assert payload["options"]["id"] == "score"
    assert TAG_ANIMATING_DOWN in surface.tags


def test_repeated_update_is_a_no_op():
    bus, surface, odometer = make_live_odometer(value=1234567)
    recorder = EventRecorder(surface)

    assert odometer.update(1234567) == 1234567
    assert odometer.update("1,234,567") == 1234567
    assert recorder.starts == []
    assert not odometer.is_animating


def test_update_while_animating_supersedes_live_plan():
    bus, surface, odometer = make_live_odometer(value=0)
    recorder = EventRecorder(surface)

    odometer.update(100)
    drive(bus, 50)
    odometer.update(200)

    assert [start["old_value"] for start in recorder.starts] == [0, 100]
    drive(bus, 99)
    assert recorder.dones == []
    drive(bus, 1)
    assert len(recorder.dones) == 1
    assert recorder.dones[0]["value"] == 200
    assert surface.text == "200"
    assert odometer.scheduler.pending == 0


def test_negative_value_renders_one_negation_mark():
    bus, surface, odometer = make_live_odometer(value=5)

    odometer.update(-42)
    marks = [token for token in surface.tokens if CLASS_NEGATION_MARK in token.classes]
    assert len(marks) == 1

    drive(bus, 100)
    assert surface.text == "-42"
    assert sum(CLASS_NEGATION_MARK in token.classes for token in surface.tokens) == 1


def test_transition_end_finishes_slide_early():
    bus, surface, odometer = make_live_odometer(value=0)
    recorder = EventRecorder(surface)

    odometer.update(100)
    surface.dispatch(EVENT_TRANSITION_END, surface=surface)
    surface.dispatch(EVENT_TRANSITION_END, surface=surface)

    assert not odometer.is_animating
    assert len(recorder.dones) == 1
    drive(bus, 120)
    assert len(recorder.dones) == 1


def test_update_after_destroy_is_ignored():
    bus, surface, odometer = make_live_odometer(value=3)
    recorder = EventRecorder(surface)

    odometer.destroy()
    assert odometer.update(9) == 3
    assert odometer.value == 3
    assert recorder.starts == []


def test_headless_instance_only_tracks_value():
    odometer = Odometer(None, value=5)

    assert not odometer.live
    assert odometer.update(10) == 10
    assert odometer.value == 10
    assert not odometer.is_animating
    assert odometer.scheduler.pending == 0


def test_non_renderable_surface_is_headless():
    surface = SimpleNamespace(renderable=False)
    odometer = Odometer(surface, value="1,000")

    assert not odometer.live
    assert odometer.value == 1000
    assert surface.odometer is odometer


def test_custom_format_function_renders_its_text():
    def dollars(value):
        return f"${value:,.0f}"

    bus, surface, odometer = make_live_odometer(value=1234, format_function=dollars)
    assert surface.text == "$1,234"


def test_on_and_off_manage_listeners():
    bus, surface, odometer = make_live_odometer(value=0)
    seen = []

    def on_done(sender, **payload):
        seen.append(payload["value"])

    odometer.on("odometerdone", on_done)
    odometer.update(3)
    drive(bus, 100)
    odometer.off("odometerdone", on_done)
    odometer.update(4)
    drive(bus, 100)

    assert seen == [3]
