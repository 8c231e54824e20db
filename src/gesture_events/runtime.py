"""Process-wide gesture engine slot.

A gesture engine makes itself available by installing its factory here,
usually as a side effect of being imported. The plugin only ever reads
the slot; loaders and engine modules write it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger("gesture_events.runtime")

# (element, options) -> engine instance exposing on/off/get
EngineFactory = Callable[[Any, dict], Any]


class EngineUnavailableError(RuntimeError):
    """Raised when an engine is needed but none has been installed."""


_engine_factory: Optional[EngineFactory] = None


def install_engine(factory: EngineFactory):
    """Make ``factory`` the globally available gesture engine."""
    global _engine_factory
    if not callable(factory):
        raise TypeError(f"Engine factory must be callable, got {type(factory).__name__}")
    if _engine_factory is not None and _engine_factory is not factory:
        logger.warning("Gesture engine already installed, replacing")
    _engine_factory = factory
    logger.info("Installed gesture engine: %s", getattr(factory, "__name__", factory))


def uninstall_engine():
    """Remove the installed engine, if any."""
    global _engine_factory
    if _engine_factory is not None:
        logger.info("Uninstalled gesture engine")
    _engine_factory = None


def is_engine_available() -> bool:
    return _engine_factory is not None


def get_engine_factory() -> EngineFactory:
    if _engine_factory is None:
        raise EngineUnavailableError("No gesture engine has been installed")
    return _engine_factory
