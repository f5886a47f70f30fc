"""Surface adapters chosen once per odometer instance.

The live adapter drives a real surface; the headless adapter stands in when
there is nothing to draw on, so the controller never branches on the
environment.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Optional, Sequence

from odometer.components.token import Token
from odometer.constants import (
    PROPERTY_DURATION,
    PROPERTY_PROGRESS,
    TAG_ANIMATING,
    TAG_ANIMATING_DOWN,
    TAG_ANIMATING_UP,
    TAG_BASE,
    TAG_THEME,
)
from odometer.rendering.surface import MutationCallback, Surface

_ODOMETER_TAG = re.compile(r"^odometer(-|$)")


class HeadlessAdapter:
    """No-op stand-in used when no renderable surface is bound."""

    live = False

    def __init__(self, surface: Optional[Surface] = None):
        self.surface = surface

    def render_tokens(self, tokens: Sequence[Token]) -> None:
        return

    def reset_tags(self, duration_property: str) -> None:
        return

    def set_duration(self, duration_property: str) -> None:
        return

    def mark_direction(self, diff: float) -> None:
        return

    def set_progress(self, fraction: float) -> None:
        return

    def observe(self, callback: MutationCallback) -> None:
        return

    def pause_observing(self) -> None:
        return

    def resume_observing(self) -> None:
        return

    def stop_observing(self) -> None:
        return

    def dispatch(self, name: str, **payload: Any) -> None:
        return

    def subscribe(self, name: str, fn: Callable[..., Any]) -> None:
        return

    def unsubscribe(self, name: str, fn: Callable[..., Any]) -> None:
        return

    def serialize(self) -> str:
        return repr(self.surface) if self.surface is not None else ""


class LiveSurfaceAdapter(HeadlessAdapter):
    """Maps odometer rendering steps onto a surface's capabilities."""

    live = True

    def __init__(self, surface: Surface):
        super().__init__(surface)
        self._observer: Optional[MutationCallback] = None
        self._watching = False

    def render_tokens(self, tokens: Sequence[Token]) -> None:
        self.surface.replace_content(tokens)

    def reset_tags(self, duration_property: str) -> None:
        # Strip previous odometer tags only
        stale = [tag for tag in self.surface.tags if _ODOMETER_TAG.match(tag)]
        if stale:
            self.surface.remove_tags(*stale)
        self.surface.add_tags(TAG_BASE, TAG_THEME)
        self.set_duration(duration_property)

    def set_duration(self, duration_property: str) -> None:
        self.surface.set_property(PROPERTY_DURATION, duration_property)

    def mark_direction(self, diff: float) -> None:
        self.surface.remove_tags(TAG_ANIMATING_UP, TAG_ANIMATING_DOWN, TAG_ANIMATING)
        self.surface.add_tags(TAG_ANIMATING_UP if diff > 0 else TAG_ANIMATING_DOWN, TAG_ANIMATING)

    def set_progress(self, fraction: float) -> None:
        self.surface.set_property(PROPERTY_PROGRESS, f"{fraction:.4f}")

    def observe(self, callback: MutationCallback) -> None:
        self._observer = callback
        self.resume_observing()

    def pause_observing(self) -> None:
        if self._observer is not None and self._watching:
            self.surface.disconnect(self._observer)
            self._watching = False

    def resume_observing(self) -> None:
        if self._observer is not None and not self._watching:
            self.surface.observe(self._observer)
            self._watching = True

    def stop_observing(self) -> None:
        self.pause_observing()
        self._observer = None

    def dispatch(self, name: str, **payload: Any) -> None:
        self.surface.dispatch(name, **payload)

    def subscribe(self, name: str, fn: Callable[..., Any]) -> None:
        self.surface.subscribe(name, fn)

    def unsubscribe(self, name: str, fn: Callable[..., Any]) -> None:
        self.surface.unsubscribe(name, fn)

    def serialize(self) -> str:
        return self.surface.serialize()


def select_adapter(surface: Optional[Surface]) -> HeadlessAdapter:
    if surface is None or not getattr(surface, "renderable", False):
        return HeadlessAdapter(surface)
    return LiveSurfaceAdapter(surface)
