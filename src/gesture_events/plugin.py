"""Event manager plugin for gesture events.

Binds pan, pinch, press, rotate, swipe and tap events (and any custom
event names from the config) through a gesture engine. The engine does
not have to be present up front: with a loader configured, registrations
made before the engine arrives are completed once the loader finishes,
and can be cancelled in the meantime.

Usage:
    plugin = GesturesPlugin(
        GestureConfig(overrides={"swipe": {"direction": 31}}),
        loader=module_loader("my_app.gesture_engine"),
    )
    manager = EventManager([plugin])

    remove = manager.add_event_listener(element, "swipeleft", on_swipe)
    ...
    remove()
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from gesture_events import runtime
from gesture_events.config import GestureConfig
from gesture_events.events import GestureNameRegistry
from gesture_events.loaders import EngineLoader
from gesture_events.manager import EventManagerPlugin

logger = logging.getLogger("gesture_events.plugin")


def _noop():
    pass


class GesturesPlugin(EventManagerPlugin):
    """Gesture event support for an EventManager.

    Args:
        config: Engine options, overrides and custom event names.
        loader: Optional lazy engine loader, used when no engine is
            installed at registration time.
        is_engine_available: Presence check for the engine. Defaults to
            the process-wide engine slot.
        loop: Event loop that runs the loader. Defaults to the current one.
    """

    def __init__(
        self,
        config: Optional[GestureConfig] = None,
        loader: Optional[EngineLoader] = None,
        is_engine_available: Optional[Callable[[], bool]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        super().__init__()
        self._config = config or GestureConfig()
        self._loader = loader
        self._is_engine_available = is_engine_available or runtime.is_engine_available
        self._loop = loop

    def supports(self, event_name: str) -> bool:
        if not self.registry.is_recognized(event_name):
            return False

        if not self._is_engine_available() and self._loader is None:
            self._warn_unbindable(event_name)
            return False

        return True

    def add_event_listener(
        self, element: Any, event_name: str, handler: Callable
    ) -> Callable[[], None]:
        event_name = event_name.lower()

        if self._is_engine_available():
            return self._bind(element, event_name, handler)

        if self._loader is None:
            self._warn_unbindable(event_name)
            return _noop

        return self._bind_when_loaded(element, event_name, handler)

    def is_custom_event(self, event_name: str) -> bool:
        return self.registry.is_custom(event_name)

    @property
    def registry(self) -> GestureNameRegistry:
        return GestureNameRegistry(self._config.events)

    @property
    def config(self) -> GestureConfig:
        return self._config

    def _bind(self, element: Any, event_name: str, handler: Callable) -> Callable[[], None]:
        zone = self.zone

        def bind():
            # Engine setup stays outside the zone; only handler delivery enters it.
            engine = self._config.build_engine(element)

            def callback(event):
                zone.run_guarded(handler, event)

            engine.on(event_name, callback)
            logger.debug("Bound %s listener", event_name)

            removed = False

            def remove():
                nonlocal removed
                if removed:
                    return
                removed = True
                engine.off(event_name, callback)
                logger.debug("Removed %s listener", event_name)

            return remove

        return zone.run_outside(bind)

    def _bind_when_loaded(
        self, element: Any, event_name: str, handler: Callable
    ) -> Callable[[], None]:
        # Until the engine is loaded, deregistering cancels the pending
        # registration. Once bound, it removes the listener instead.
        cancelled = False

        def cancel():
            nonlocal cancelled
            cancelled = True

        deregister: Callable[[], None] = cancel

        def on_loaded(future: asyncio.Future):
            nonlocal deregister
            error = None if future.cancelled() else future.exception()
            if future.cancelled() or error is not None:
                self._warn_loader_failed(event_name, error)
                deregister = _noop
                return

            if not self._is_engine_available():
                logger.warning(
                    "The custom gesture engine loader completed, "
                    "but the gesture engine is not present."
                )
                deregister = _noop
                return

            if cancelled:
                deregister = _noop
                return

            try:
                deregister = self._bind(element, event_name, handler)
            except Exception as e:
                self._warn_loader_failed(event_name, e)
                deregister = _noop

        try:
            loading = self._loader()
        except Exception as e:
            self._warn_loader_failed(event_name, e)
            return _noop

        try:
            pending = asyncio.ensure_future(loading, loop=self._loop)
        except TypeError as e:
            # Not awaitable.
            self._warn_loader_failed(event_name, e)
            return _noop
        except RuntimeError:
            # No event loop to schedule on; the loader never got to run.
            if asyncio.iscoroutine(loading):
                loading.close()
            logger.warning(
                'The "%s" event cannot be bound because no event loop is available '
                "to run the custom gesture engine loader.",
                event_name,
            )
            return _noop

        pending.add_done_callback(on_loaded)

        # Return a function that calls the current `deregister`, not
        # `deregister` itself, so rebinding it above takes effect.
        def remove():
            deregister()

        return remove

    @staticmethod
    def _warn_unbindable(event_name: str):
        logger.warning(
            'The "%s" event cannot be bound because the gesture engine is not '
            "loaded and no custom loader has been specified.",
            event_name,
        )

    @staticmethod
    def _warn_loader_failed(event_name: str, error: Optional[BaseException]):
        logger.warning(
            'The "%s" event cannot be bound because the custom gesture engine loader failed.',
            event_name,
            exc_info=error,
        )
