import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from odometer.config import reset_global_options
from tests.helpers import EventRecorder, drive, make_live_odometer

__all__ = [
    "EventRecorder",
    "drive",
    "make_live_odometer",
]


@pytest.fixture(autouse=True)
def _fresh_global_options():
    reset_global_options()
    yield
    reset_global_options()
