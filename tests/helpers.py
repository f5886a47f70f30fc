from __future__ import annotations

from typing import Any, Dict, List, Tuple

from odometer.events.bus import EVENT_ODOMETER_DONE, EVENT_ODOMETER_START, EVENT_TICK, EventBus
from odometer.odometer import Odometer
from odometer.rendering.surface import TextSurface
from odometer.systems.scheduler import FrameScheduler


def drive(bus: EventBus, ticks: int, dt: float = 0.02) -> None:
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=dt)


def make_live_odometer(**options: Any) -> Tuple[EventBus, TextSurface, Odometer]:
    """Odometer bound to an in-memory surface and a tick-driven scheduler."""
    bus = EventBus()
    surface = TextSurface()
    instance = Odometer(surface, scheduler=FrameScheduler(bus), **options)
    return bus, surface, instance


class EventRecorder:
    """Collects start/done notifications dispatched on a surface."""

    def __init__(self, surface: TextSurface):
        self.starts: List[Dict[str, Any]] = []
        self.dones: List[Dict[str, Any]] = []
        surface.subscribe(EVENT_ODOMETER_START, self._on_start)
        surface.subscribe(EVENT_ODOMETER_DONE, self._on_done)

    def _on_start(self, sender, **payload):
        self.starts.append(payload)

    def _on_done(self, sender, **payload):
        self.dones.append(payload)
