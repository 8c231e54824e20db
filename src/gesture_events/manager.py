"""Event manager that routes listener registrations to event plugins.

Each plugin claims the event names it can bind via ``supports``. The
manager asks its plugins in order and hands the registration to the
first one that accepts the name.

Usage:
    manager = EventManager([GesturesPlugin(config)], zone=ExecutionZone())
    remove = manager.add_event_listener(element, "swipeleft", on_swipe)
    ...
    remove()
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from gesture_events.zone import ExecutionZone

logger = logging.getLogger("gesture_events.manager")


class UnsupportedEventError(LookupError):
    """Raised when no plugin can bind an event name."""


class EventManagerPlugin:
    """Base class for event plugins.

    The owning manager is attached to ``manager`` when the plugin is
    registered.
    """

    def __init__(self):
        self.manager: Optional[EventManager] = None

    def supports(self, event_name: str) -> bool:
        raise NotImplementedError

    def add_event_listener(
        self, element: Any, event_name: str, handler: Callable
    ) -> Callable[[], None]:
        """Bind ``handler`` and return a function that unbinds it."""
        raise NotImplementedError

    @property
    def zone(self) -> ExecutionZone:
        if self.manager is None:
            raise RuntimeError(f"{type(self).__name__} is not attached to an EventManager")
        return self.manager.zone


class EventManager:
    """Dispatches listener registrations to the plugin that supports them."""

    def __init__(self, plugins: Iterable[EventManagerPlugin], zone: Optional[ExecutionZone] = None):
        self._zone = zone or ExecutionZone()
        self._plugins: list[EventManagerPlugin] = []
        self._cache: dict[str, EventManagerPlugin] = {}
        for plugin in plugins:
            self.register(plugin)

    def register(self, plugin: EventManagerPlugin):
        """Attach a plugin. Later plugins are consulted after earlier ones."""
        plugin.manager = self
        self._plugins.append(plugin)
        self._cache.clear()
        logger.debug("Registered event plugin: %s", type(plugin).__name__)

    def add_event_listener(
        self, element: Any, event_name: str, handler: Callable
    ) -> Callable[[], None]:
        plugin = self._find_plugin(event_name)
        return plugin.add_event_listener(element, event_name, handler)

    def _find_plugin(self, event_name: str) -> EventManagerPlugin:
        plugin = self._cache.get(event_name)
        if plugin is not None:
            return plugin

        for plugin in self._plugins:
            if plugin.supports(event_name):
                self._cache[event_name] = plugin
                return plugin

        raise UnsupportedEventError(f"No event manager plugin found for event {event_name}")

    @property
    def zone(self) -> ExecutionZone:
        return self._zone

    @property
    def plugins(self) -> list[EventManagerPlugin]:
        return list(self._plugins)
