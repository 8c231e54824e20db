"""Gesture engine configuration.

Holds the base engine options, per-recognizer overrides and the list of
custom event names the gestures plugin should accept. One config builds
an engine instance per element.

Configuration via YAML file:

    options:
      touch_action: auto
    overrides:
      swipe:
        direction: 31
      pan:
        threshold: 20
    events:
      - longpress
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from gesture_events.runtime import EngineFactory, get_engine_factory

logger = logging.getLogger("gesture_events.config")

# Recognizers the plugin always turns on, whatever the base options say.
ALWAYS_ENABLED = ("pinch", "rotate")


class ConfigError(ValueError):
    """Raised when a gesture config has the wrong shape."""


@dataclass
class GestureConfig:
    """Options used to build gesture engine instances.

    ``options`` and the ``overrides`` values are passed to the engine
    untouched; only their shape (mappings) is checked.
    """
    events: list[str] = field(default_factory=list)
    overrides: dict[str, dict[str, Any]] = field(default_factory=dict)
    options: Optional[dict[str, Any]] = None
    engine_factory: Optional[EngineFactory] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        self.validate()
        self.events = list(self.events)

    def validate(self):
        if self.options is not None and not isinstance(self.options, Mapping):
            raise ConfigError(f"options must be a mapping, got {type(self.options).__name__}")

        if not isinstance(self.overrides, Mapping):
            raise ConfigError(f"overrides must be a mapping, got {type(self.overrides).__name__}")
        for name, bag in self.overrides.items():
            if not isinstance(name, str):
                raise ConfigError(f"override keys must be event names, got {name!r}")
            if not isinstance(bag, Mapping):
                raise ConfigError(
                    f"override for '{name}' must be a mapping, got {type(bag).__name__}"
                )

        if not isinstance(self.events, (list, tuple)) or not all(
            isinstance(e, str) for e in self.events
        ):
            raise ConfigError("events must be a list of event names")

    def build_engine(self, element: Any) -> Any:
        """Create an engine instance for ``element``.

        Pinch and rotate are always enabled, then every override is applied
        to its recognizer. Errors raised by the engine are not caught.
        """
        factory = self.engine_factory or get_engine_factory()
        engine = factory(element, dict(self.options or {}))

        for name in ALWAYS_ENABLED:
            engine.get(name).set({"enable": True})

        for name, bag in self.overrides.items():
            engine.get(name).set(dict(bag))

        return engine

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "events": list(self.events),
            "overrides": {k: dict(v) for k, v in self.overrides.items()},
        }
        if self.options is not None:
            data["options"] = dict(self.options)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GestureConfig:
        if not isinstance(data, Mapping):
            raise ConfigError(f"gesture config must be a mapping, got {type(data).__name__}")
        return cls(
            events=data.get("events") or [],
            overrides=data.get("overrides") or {},
            options=data.get("options"),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> GestureConfig:
        """Load a gesture config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        config = cls.from_dict(data)
        logger.debug(
            "Loaded gesture config from %s (%d override(s), %d custom event(s))",
            path, len(config.overrides), len(config.events),
        )
        return config

    def to_yaml(self, path: str | Path):
        """Save the config to YAML."""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
