"""In-process reference gesture engine.

Implements the engine surface the gestures plugin relies on: per-element
instances with named recognizers, listener registration and event
emission. It does no recognition of its own; an input layer (or a test)
calls ``emit`` when it has decided that a gesture happened.

Usage:
    from gesture_events.runtime import install_engine
    install_engine(GestureEngine)

    engine = GestureEngine(element, {"touch_action": "auto"})
    engine.get("swipe").set({"direction": "horizontal"})
    engine.on("swipeleft swiperight", handler)
    engine.emit("swipeleft", event)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

logger = logging.getLogger("gesture_events.engine")

# Recognizers every engine instance starts with. Pinch and rotate block
# vertical scrolling on touch devices, so they start disabled.
DEFAULT_RECOGNIZERS: dict[str, dict[str, Any]] = {
    "pan": {"enable": True},
    "pinch": {"enable": False},
    "press": {"enable": True},
    "rotate": {"enable": False},
    "swipe": {"enable": True},
    "tap": {"enable": True},
}


@dataclass
class Recognizer:
    """A named recognizer and its option bag."""
    name: str
    options: dict[str, Any] = field(default_factory=dict)

    def set(self, options: dict[str, Any]) -> Recognizer:
        """Merge ``options`` into the recognizer. Returns self for chaining."""
        self.options.update(options)
        return self

    @property
    def enabled(self) -> bool:
        return bool(self.options.get("enable", True))


class GestureEngine:
    """Gesture engine instance bound to a single element."""

    def __init__(self, element: Any, options: Optional[dict[str, Any]] = None):
        self.element = element
        self.options: dict[str, Any] = dict(options or {})
        self._recognizers: dict[str, Recognizer] = {
            name: Recognizer(name, dict(opts))
            for name, opts in DEFAULT_RECOGNIZERS.items()
        }
        self._handlers: dict[str, list[Callable]] = {}

    def get(self, name: str) -> Recognizer:
        """Look up a recognizer by name. Raises KeyError if unknown."""
        try:
            return self._recognizers[name]
        except KeyError:
            raise KeyError(f"Unknown recognizer: {name}") from None

    def add(self, recognizer: Recognizer) -> Recognizer:
        """Register an extra recognizer, replacing one with the same name."""
        self._recognizers[recognizer.name] = recognizer
        return recognizer

    def on(self, events: str, handler: Callable):
        """Listen to one or more space-separated events."""
        for name in events.split():
            self._handlers.setdefault(name, []).append(handler)

    def off(self, events: str, handler: Optional[Callable] = None):
        """Stop listening. Without a handler, all handlers of the event go.

        Handlers that are not registered are ignored.
        """
        for name in events.split():
            if handler is None:
                self._handlers.pop(name, None)
                continue
            handlers = self._handlers.get(name, [])
            if handler in handlers:
                handlers.remove(handler)
            if not handlers:
                self._handlers.pop(name, None)

    def emit(self, name: str, event: Any) -> int:
        """Deliver ``event`` to every handler of ``name``.

        Returns the number of handlers called.
        """
        handlers = list(self._handlers.get(name, []))
        for handler in handlers:
            handler(event)
        logger.debug("Emitted %s to %d handler(s)", name, len(handlers))
        return len(handlers)

    def listener_count(self, name: str) -> int:
        return len(self._handlers.get(name, []))

    def destroy(self):
        """Drop all listeners."""
        self._handlers.clear()

    @property
    def recognizers(self) -> dict[str, Recognizer]:
        return dict(self._recognizers)
