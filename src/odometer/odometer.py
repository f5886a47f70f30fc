from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional

from odometer.components.format_spec import FormatSpec
from odometer.components.instance_state import InstanceState
from odometer.components.timing import Timing
from odometer.config import get_global_options
from odometer.constants import COUNT_FRAMERATE, DESTROY_GRACE_MS, DIGIT_SPEEDBOOST, DURATION, FRAMERATE
from odometer.events.bus import EVENT_ODOMETER_DONE, EVENT_ODOMETER_START, EVENT_TRANSITION_END
from odometer.formatting.normalizer import RawValue, clean_value
from odometer.formatting.parser import parse_format
from odometer.formatting.projection import format_digits, project_plan
from odometer.rendering.adapter import select_adapter
from odometer.rendering.surface import Surface
from odometer.systems.animation import AnimationTask, CountAnimation, SlideAnimation
from odometer.systems.planner import plan_slide
from odometer.systems.scheduler import CancelToken, FrameScheduler

logger = logging.getLogger(__name__)

TIMING_KEYS = ("duration", "framerate", "count_framerate")
FORMAT_KEYS = ("format", "format_function")


def _option(options: Dict[str, Any], key: str, default: Any) -> Any:
    value = options.get(key)
    return default if value is None else value


def _serialize_default(obj: Any) -> str:
    if callable(obj):
        return getattr(obj, "__qualname__", repr(obj))
    return repr(obj)


class Odometer:
    """Animated numeric display bound to a rendering surface.

    ``update`` changes the logical value immediately and hands the visual
    catch-up to a slide or count task on the scheduler. Updating again while a
    task is live supersedes it. Without a renderable surface the instance only
    tracks its value.

    Options: ``value``, ``format``, ``duration`` (ms), ``framerate``,
    ``count_framerate``, ``animation`` (``"slide"`` or ``"count"``),
    ``format_function``, ``speed_boost`` and ``id``.
    """

    def __init__(
        self,
        surface: Optional[Surface] = None,
        *,
        scheduler: Optional[FrameScheduler] = None,
        **options: Any,
    ):
        options = {**get_global_options().defaults, **options}
        options.pop("surface", None)
        # Parse first so an invalid format leaves nothing half-built.
        format_spec = parse_format(options.get("format"))

        self.surface = surface
        self.scheduler = scheduler or FrameScheduler()
        self.timing = Timing(
            duration=_option(options, "duration", DURATION),
            framerate=_option(options, "framerate", FRAMERATE),
            count_framerate=_option(options, "count_framerate", COUNT_FRAMERATE),
        )
        options["duration"] = self.timing.duration
        self.state = InstanceState(value=0.0, format=format_spec, options=options)
        self.state.value = self.clean_value(options.get("value"))

        self._adapter = select_adapter(surface)
        self._task: Optional[AnimationTask] = None
        self._timeouts: List[CancelToken] = []
        self._transition_end_bound = False
        self._once_handler: Optional[Callable[..., None]] = None

        if surface is not None:
            setattr(surface, "odometer", self)
        if self._adapter.live:
            self.render()
            self._adapter.observe(self._on_surface_mutation)

    @classmethod
    def attach(cls, surface: Surface, *, scheduler: Optional[FrameScheduler] = None, **options: Any) -> "Odometer":
        """Return the surface's existing instance reconfigured with ``options``, or a new one."""
        existing = getattr(surface, "odometer", None)
        if isinstance(existing, cls) and not existing.destroyed:
            existing.set_options(**options)
            if "value" not in options:
                existing.render()
            return existing
        return cls(surface, scheduler=scheduler, **options)

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def value(self) -> float:
        return self.state.value

    @property
    def format(self) -> FormatSpec:
        return self.state.format

    @property
    def options(self) -> Dict[str, Any]:
        return self.state.options

    @property
    def is_animating(self) -> bool:
        return self.state.is_animating

    @property
    def destroyed(self) -> bool:
        return self.state.destroyed

    @property
    def live(self) -> bool:
        return self._adapter.live

    @property
    def max_values(self) -> int:
        return self.timing.max_values

    def get_options(self) -> Dict[str, Any]:
        return dict(self.state.options)

    def clean_value(self, raw: RawValue) -> float:
        return clean_value(raw, self.state.format)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, value: Optional[float] = None) -> None:
        """Draw ``value`` (default: the current value) as a static, settled display."""
        if not self._adapter.live:
            return
        value = self.state.value if value is None else value
        self._adapter.pause_observing()
        self._adapter.reset_tags(self.timing.duration_property)
        self._adapter.render_tokens(format_digits(value, self.state.format, self.options.get("format_function")))
        self._adapter.resume_observing()

    def _render_value(self, value: float) -> None:
        self._adapter.pause_observing()
        self._adapter.render_tokens(format_digits(value, self.state.format, self.options.get("format_function")))
        self._adapter.resume_observing()

    def _on_surface_mutation(self, surface: Surface) -> None:
        new_text = surface.text
        self.render(self.state.value)
        self.update(new_text)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------
    def update(self, new_value: RawValue) -> float:
        """Set a new value and start animating towards it; returns the logical value."""
        if self.state.destroyed:
            return self.state.value
        value = self.clean_value(new_value)
        if not self._adapter.live:
            self.state.value = value
            return value

        old_value = self.state.value
        diff = value - old_value
        if not diff:
            return old_value

        self._adapter.mark_direction(diff)
        self.state.is_animating = True
        self._emit(EVENT_ODOMETER_START, value=value, old_value=old_value)
        self.state.value = value
        self._animate(old_value, value)
        return self.state.value

    def _animate(self, old_value: float, new_value: float) -> None:
        if self._task is not None and self._task.live:
            logger.debug("Superseding odometer animation towards %s with %s", old_value, new_value)
            self._task.cancel()
        self._task = None

        if self.options.get("animation") == "count":
            self._task = CountAnimation(
                self.scheduler,
                old_value,
                new_value,
                self.timing.duration,
                self.timing.count_ms_per_frame,
                self.state.format.precision,
                self._render_value,
                self._on_animation_done,
            ).start()
            return

        plan = plan_slide(
            old_value,
            new_value,
            self.state.format,
            self.timing.max_values,
            _option(self.options, "speed_boost", DIGIT_SPEEDBOOST),
        )
        if plan is None:
            self._on_animation_done()
            return
        self._bind_transition_end()
        self._adapter.pause_observing()
        self._adapter.render_tokens(project_plan(plan, self.state.format))
        self._adapter.set_progress(0.0)
        self._adapter.resume_observing()
        self._task = SlideAnimation(
            self.scheduler,
            plan,
            self.timing.duration,
            self._adapter.set_progress,
            self._on_animation_done,
        ).start()

    def _on_animation_done(self) -> None:
        self._task = None
        self.render()
        self.state.is_animating = False
        self._emit(EVENT_ODOMETER_DONE, value=self.state.value)

    def _bind_transition_end(self) -> None:
        if self._transition_end_bound:
            return
        self._transition_end_bound = True
        self._adapter.subscribe(EVENT_TRANSITION_END, self._on_transition_end)

    def _on_transition_end(self, sender, **payload) -> None:
        # The surface may report once per column; finishing is idempotent.
        if isinstance(self._task, SlideAnimation):
            self._task.finish()

    def _emit(self, name: str, **payload: Any) -> None:
        self._adapter.dispatch(
            name,
            id=self.options.get("id"),
            surface=self.surface,
            instance=self,
            options=self.get_options(),
            **payload,
        )

    def set_options(self, **changes: Any) -> None:
        """Merge option changes into this instance and apply them immediately."""
        if self.state.destroyed or not changes:
            return
        # The bound surface cannot be swapped at runtime.
        changes.pop("surface", None)

        has_value = "value" in changes
        format_changed = any(key in changes for key in FORMAT_KEYS)
        timing_changed = any(key in changes for key in TIMING_KEYS)
        format_spec = parse_format(changes["format"]) if "format" in changes else self.state.format

        options = {**self.state.options, **changes}
        self.timing.configure(
            duration=_option(options, "duration", DURATION),
            framerate=_option(options, "framerate", FRAMERATE),
            count_framerate=_option(options, "count_framerate", COUNT_FRAMERATE),
        )
        options["duration"] = self.timing.duration
        self.state.options = options
        self.state.format = format_spec
        self._adapter.set_duration(self.timing.duration_property)

        if "format" in changes:
            # Keep the stored value rounded to the new precision.
            self.state.value = self.clean_value(self.state.value)
        if format_changed or timing_changed:
            self.render()
        if has_value:
            self.update(_option(options, "value", 0))

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self._adapter.subscribe(event, handler)

    def off(self, event: str, handler: Callable[..., Any]) -> None:
        self._adapter.unsubscribe(event, handler)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def animate_once_and_disconnect(self, value: RawValue = None) -> None:
        """Animate to ``value`` once, then destroy on completion or after a timeout."""
        if self.state.destroyed:
            return
        if value is not None:
            self.update(value)
        if not self._adapter.live:
            self.destroy()
            return

        def once(sender, **payload):
            self.destroy()

        self._once_handler = once
        self._adapter.subscribe(EVENT_ODOMETER_DONE, once)
        # Fallback in case the done notification never fires.
        self._timeouts.append(
            self.scheduler.call_later(self.timing.duration + DESTROY_GRACE_MS, lambda now: self.destroy())
        )

    def destroy(self) -> None:
        """Cancel scheduled work and detach listeners. Safe to call repeatedly."""
        if self.state.destroyed:
            return
        self._adapter.stop_observing()
        if self._task is not None:
            self._task.cancel()
            self._task = None
        for token in self._timeouts:
            token.cancel()
        self._timeouts.clear()
        if self._transition_end_bound:
            self._adapter.unsubscribe(EVENT_TRANSITION_END, self._on_transition_end)
            self._transition_end_bound = False
        if self._once_handler is not None:
            self._adapter.unsubscribe(EVENT_ODOMETER_DONE, self._once_handler)
            self._once_handler = None
        self.state.is_animating = False
        self.state.destroyed = True
        logger.debug("Odometer %s destroyed", self.options.get("id"))

    disconnect = destroy

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def to_string(self) -> str:
        """JSON snapshot of the instance; the surface is serialized, never referenced."""
        snapshot = {
            "surface": self._adapter.serialize(),
            "id": self.options.get("id"),
            "value": self.state.value,
            "options": self.get_options(),
            "globalOptions": get_global_options().as_dict(),
        }
        return json.dumps(snapshot, default=_serialize_default)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Odometer(id={self.options.get('id')!r}, value={self.state.value!r})"
