from __future__ import annotations

import math
from typing import Tuple

from odometer.components.token import Token
from odometer.constants import PROPERTY_PROGRESS, TAG_ANIMATING, TAG_ANIMATING_DOWN
from odometer.rendering.surface import TextSurface

Color = Tuple[int, int, int]


def ribbon_position(token: Token, progress: float) -> Tuple[int, float]:
    """Index of the ribbon frame on screen and how far the next one has scrolled in."""
    last = len(token.frames) - 1
    if last <= 0:
        return 0, 0.0
    position = max(0.0, min(1.0, progress)) * last
    index = min(last, math.floor(position))
    return index, position - index


class OdometerRenderer:
    """Draw a surface's token stream as a row of digit cells."""

    def __init__(self, font_size: int = 32, color: Color = (235, 235, 235), spacer_color: Color = (150, 150, 150)):
        self.font_size = font_size
        self.color = color
        self.spacer_color = spacer_color
        self.cell_width = font_size * 0.75
        self.cell_height = font_size * 1.3

    def render(self, arcade, surface: TextSurface, x: float, y: float) -> None:
        tags = surface.tags
        animating = TAG_ANIMATING in tags
        downward = TAG_ANIMATING_DOWN in tags
        try:
            progress = float(surface.properties.get(PROPERTY_PROGRESS, "1"))
        except ValueError:
            progress = 1.0

        if not surface.tokens:
            arcade.draw_text(surface.text, x, y, self.color, self.font_size)
            return

        cursor = x
        for token in surface.tokens:
            if not token.is_digit:
                arcade.draw_text(token.text, cursor, y, self.spacer_color, self.font_size)
                cursor += self.cell_width * 0.5
                continue
            if not animating or token.is_static:
                arcade.draw_text(token.text, cursor, y, self.color, self.font_size)
            else:
                self._draw_ribbon(arcade, token, cursor, y, progress, downward)
            cursor += self.cell_width

    def _draw_ribbon(self, arcade, token: Token, x: float, y: float, progress: float, downward: bool) -> None:
        index, scrolled = ribbon_position(token, progress)
        shift = scrolled * self.cell_height
        direction = -1 if downward else 1
        arcade.draw_text(str(token.frames[index]), x, y + direction * shift, self.color, self.font_size)
        if scrolled and index + 1 < len(token.frames):
            incoming_y = y - direction * (self.cell_height - shift)
            arcade.draw_text(str(token.frames[index + 1]), x, incoming_y, self.color, self.font_size)
