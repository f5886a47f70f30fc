"""Entry point for the odometer demo.

Sets up the event bus, a world of surfaces, the odometers bound to them and an
Arcade window that drives ticks and draws the surfaces.
"""
import logging
import random

import arcade
from arcade import Window, run, set_background_color, color

from odometer.config import set_global_options
from odometer.events.bus import EVENT_TICK, EventBus
from odometer.odometer import Odometer
from odometer.rendering.arcade_renderer import OdometerRenderer
from odometer.rendering.surface import TextSurface
from odometer.systems.discovery import auto_init
from odometer.world import create_world

class OdometerWindow(Window):
    def __init__(self):
        super().__init__(800, 600, "Odometer")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.surfaces = [
            TextSurface("1234567", name="visitors", tags=("odometer",)),
            TextSurface("1234.5", name="revenue", tags=("odometer",)),
            TextSurface("-42", name="delta", tags=("odometer",)),
        ]
        set_global_options(selector=".odometer", auto=True)
        self.world = create_world(self.event_bus, self.surfaces)
        # Revenue shows cents and counts instead of sliding; bound first so its
        # text is read at cent precision.
        revenue = self.surfaces[1]
        Odometer(revenue, scheduler=self.world.scheduler, value=revenue.text, format="(,ddd).dd", animation="count")
        self.odometers = auto_init(self.world)
        self.renderer = OdometerRenderer()
        self.rng = random.Random()
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        top = self.height - 120
        for idx, surface in enumerate(self.surfaces):
            arcade.draw_text(surface.name or "", 40, top - idx * 140 + 50, color.GRAY, 14)
            self.renderer.render(arcade, surface, 40, top - idx * 140)

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        # Any key jumps every odometer to a new random value.
        for instance in self.odometers:
            current = instance.value
            instance.update(current + self.rng.randint(-5000, 50000) / (100 if instance.format.precision else 1))

def main():
    logging.basicConfig(level=logging.INFO)
    window = OdometerWindow()
    run()

if __name__ == "__main__":
    main()
