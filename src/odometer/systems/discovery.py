from __future__ import annotations

from typing import List

from esper import World

from odometer.config import get_global_options
from odometer.odometer import Odometer
from odometer.rendering.surface import TextSurface


def init_odometers(world: World) -> List[Odometer]:
    """Bind an odometer to every surface matching the global selector.

    Each surface's current text seeds the instance value. Surfaces that already
    carry an instance are reconfigured rather than rebound.
    """
    selector = get_global_options().selector or ".odometer"
    scheduler = getattr(world, "scheduler", None)
    instances: List[Odometer] = []
    for entity, surface in list(world.get_component(TextSurface)):
        if not surface.matches(selector):
            continue
        instance = Odometer.attach(surface, scheduler=scheduler, value=surface.text)
        if world.has_component(entity, Odometer):
            world.remove_component(entity, Odometer)
        world.add_component(entity, instance)
        instances.append(instance)
    return instances


def auto_init(world: World) -> List[Odometer]:
    """Run :func:`init_odometers` unless auto initialisation is switched off."""
    if get_global_options().auto is False:
        return []
    return init_odometers(world)
