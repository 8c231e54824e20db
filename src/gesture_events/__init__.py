"""gesture_events - Gesture event support for event-manager based UIs."""

__version__ = "0.1.0"

from gesture_events.events import EVENT_NAMES, GestureNameRegistry, is_recognized
from gesture_events.runtime import (
    EngineUnavailableError,
    install_engine,
    uninstall_engine,
    is_engine_available,
)
from gesture_events.engine import GestureEngine, Recognizer
from gesture_events.config import GestureConfig, ConfigError
from gesture_events.zone import ExecutionZone
from gesture_events.loaders import module_loader, file_loader
from gesture_events.manager import EventManager, EventManagerPlugin, UnsupportedEventError
from gesture_events.plugin import GesturesPlugin
