"""Rendering surfaces an odometer can be bound to."""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterable, List, Protocol, Sequence, Set, runtime_checkable

from odometer.components.token import Token
from odometer.events.bus import EventBus
from odometer.formatting.projection import tokens_text

MutationCallback = Callable[["Surface"], None]


@runtime_checkable
class Surface(Protocol):
    """Capabilities an odometer needs from whatever displays it."""

    renderable: bool
    text: str
    odometer: Any

    def replace_content(self, tokens: Sequence[Token]) -> None: ...

    def add_tags(self, *tags: str) -> None: ...

    def remove_tags(self, *tags: str) -> None: ...

    @property
    def tags(self) -> Set[str]: ...

    def set_property(self, name: str, value: str) -> None: ...

    def observe(self, callback: MutationCallback) -> None: ...

    def disconnect(self, callback: MutationCallback) -> None: ...

    def dispatch(self, name: str, **payload: Any) -> None: ...

    def subscribe(self, name: str, fn: Callable[..., Any]) -> None: ...

    def unsubscribe(self, name: str, fn: Callable[..., Any]) -> None: ...

    def serialize(self) -> str: ...


class TextSurface:
    """In-memory surface holding a token stream, tags and style properties.

    Writing :attr:`text` from outside replaces the content with raw text and
    notifies mutation observers, the way a host would overwrite a label.
    """

    renderable = True

    def __init__(self, text: str = "", *, name: str | None = None, tags: Iterable[str] = ()):
        self.name = name
        self.tokens: List[Token] = []
        self.properties: Dict[str, str] = {}
        self.odometer = None
        self._raw_text = text
        self._tags: Set[str] = set(tags)
        self._observers: List[MutationCallback] = []
        self._bus = EventBus()
        self.mutations = 0

    @property
    def text(self) -> str:
        if self.tokens:
            return tokens_text(self.tokens)
        return self._raw_text

    @text.setter
    def text(self, value: str) -> None:
        self._raw_text = str(value)
        self.tokens = []
        self._notify()

    @property
    def tags(self) -> Set[str]:
        return set(self._tags)

    def replace_content(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self._raw_text = ""
        self._notify()

    def add_tags(self, *tags: str) -> None:
        self._tags.update(tags)

    def remove_tags(self, *tags: str) -> None:
        self._tags.difference_update(tags)

    def set_property(self, name: str, value: str) -> None:
        self.properties[name] = value

    def observe(self, callback: MutationCallback) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def disconnect(self, callback: MutationCallback) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    @property
    def observed(self) -> bool:
        return bool(self._observers)

    def _notify(self) -> None:
        self.mutations += 1
        for callback in list(self._observers):
            callback(self)

    def dispatch(self, name: str, **payload: Any) -> None:
        self._bus.emit(name, **payload)

    def subscribe(self, name: str, fn: Callable[..., Any]) -> None:
        self._bus.subscribe(name, fn)

    def unsubscribe(self, name: str, fn: Callable[..., Any]) -> None:
        self._bus.unsubscribe(name, fn)

    def matches(self, selector: str) -> bool:
        """Match ``.tag``, ``#name`` or a bare tag."""
        if selector.startswith("#"):
            return self.name == selector[1:]
        return selector.lstrip(".") in self._tags

    def serialize(self) -> str:
        return json.dumps({
            "name": self.name,
            "tags": sorted(self._tags),
            "text": self.text,
            "properties": self.properties,
        })

    def __repr__(self) -> str:
        return f"TextSurface(name={self.name!r}, text={self.text!r})"
