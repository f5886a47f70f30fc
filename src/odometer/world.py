from __future__ import annotations

from typing import Iterable

from esper import World

from odometer.events.bus import EventBus
from odometer.rendering.surface import TextSurface
from odometer.systems.scheduler import FrameScheduler


def create_world(
    event_bus: EventBus,
    surfaces: Iterable[TextSurface] = (),
    *,
    scheduler: FrameScheduler | None = None,
) -> World:
    """Build a world holding one entity per surface and a tick-driven scheduler."""
    world = World()
    setattr(world, "event_bus", event_bus)
    setattr(world, "scheduler", scheduler or FrameScheduler(event_bus))
    for surface in surfaces:
        world.create_entity(surface)
    return world


def add_surface(world: World, surface: TextSurface) -> int:
    return world.create_entity(surface)
