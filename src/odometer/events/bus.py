from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so handlers not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)

    def has_receivers(self, name: str) -> bool:
        sig = self._signals.get(name)
        return bool(sig and sig.receivers)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                          # payload: dt=float (seconds)


# ============================================================================
# ODOMETER NOTIFICATIONS
# ============================================================================
EVENT_ODOMETER_START = "odometerstart"       # payload: id, surface, instance, value, old_value, options
EVENT_ODOMETER_DONE = "odometerdone"         # payload: id, surface, instance, value, options


# ============================================================================
# SURFACE
# ============================================================================
EVENT_TRANSITION_END = "transitionend"       # payload: surface
