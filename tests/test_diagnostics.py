import json

from odometer.config import set_global_options
from odometer.odometer import Odometer
from tests.helpers import make_live_odometer


def dollars(value):
    return f"${value:,.0f}"


def test_to_string_snapshot():
    set_global_options(selector=".score")
    bus, surface, odometer = make_live_odometer(value=42, id="score")

    data = json.loads(odometer.to_string())

    assert data["id"] == "score"
    assert data["value"] == 42
    assert data["options"]["duration"] == 2000
    assert data["globalOptions"]["selector"] == ".score"
    assert json.loads(data["surface"])["text"] == "42"
    assert str(odometer) == odometer.to_string()


def test_callables_are_reduced_to_names():
    bus, surface, odometer = make_live_odometer(value=1234, format_function=dollars)

    data = json.loads(odometer.to_string())

    assert data["options"]["format_function"] == "dollars"
    assert json.loads(data["surface"])["text"] == "$1,234"


def test_headless_snapshot_and_repr():
    odometer = Odometer(None, value=3, id="hidden")

    data = json.loads(odometer.to_string())

    assert data["surface"] == ""
    assert data["value"] == 3
    assert repr(odometer) == "Odometer(id='hidden', value=3.0)"
