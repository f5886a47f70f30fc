from tests.helpers import EventRecorder, drive, make_live_odometer


def test_external_text_write_feeds_update():
    bus, surface, odometer = make_live_odometer(value=10)
    recorder = EventRecorder(surface)

    surface.text = "25"

    assert odometer.value == 25
    assert odometer.is_animating
    assert recorder.starts[0]["old_value"] == 10
    drive(bus, 100)
    assert surface.text == "25"
    assert len(recorder.dones) == 1


def test_own_renders_do_not_loop_back():
    bus, surface, odometer = make_live_odometer(value=10)
    recorder = EventRecorder(surface)

    odometer.update(20)
    drive(bus, 100)

    assert len(recorder.starts) == 1
    assert surface.observed


def test_malformed_external_text_animates_to_zero():
    bus, surface, odometer = make_live_odometer(value=10)

    surface.text = "n/a"

    assert odometer.value == 0
    drive(bus, 100)
    assert surface.text == "0"


def test_destroyed_instance_stops_watching():
    bus, surface, odometer = make_live_odometer(value=10)
    odometer.destroy()

    surface.text = "99"

    assert odometer.value == 10
    assert surface.text == "99"
