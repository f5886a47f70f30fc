from tests.helpers import EventRecorder, drive, make_live_odometer


def test_count_renders_intermediate_values_at_count_framerate():
    bus, surface, odometer = make_live_odometer(value=0, animation="count", duration=1000)

    odometer.update(100)
    drive(bus, 2)
    assert surface.text == "0"
    drive(bus, 1)
    assert surface.text == "6"
    assert odometer.is_animating


def test_count_settles_on_exact_target():
    bus, surface, odometer = make_live_odometer(value=0, animation="count", duration=1000)
    recorder = EventRecorder(surface)

    odometer.update(100)
    drive(bus, 50)
    assert odometer.is_animating
    drive(bus, 1)
    assert not odometer.is_animating
    assert surface.text == "100"
    assert len(recorder.dones) == 1
    assert odometer.scheduler.pending == 0


def test_count_rounds_at_format_precision():
    bus, surface, odometer = make_live_odometer(
        value=0, animation="count", duration=1000, format="(,ddd).dd"
    )

    odometer.update(1)
    drive(bus, 3)
    assert surface.text == "0.06"
    drive(bus, 60)
    assert surface.text == "1.00"


def test_count_superseded_by_new_update():
    bus, surface, odometer = make_live_odometer(value=0, animation="count", duration=1000)
    recorder = EventRecorder(surface)

    odometer.update(100)
    drive(bus, 10)
    odometer.update(-50)
    drive(bus, 60)

    assert len(recorder.dones) == 1
    assert surface.text == "-50"
