"""Gesture event names understood by the gestures plugin.

The fixed set covers the recognizers every gesture engine ships with
(pan, pinch, press, rotate, swipe, tap) and their phase/direction variants.
Hosts can extend it with custom event names through the gesture config.
"""

from __future__ import annotations

from typing import Iterable, Iterator

EVENT_NAMES = frozenset({
    # pan
    "pan",
    "panstart",
    "panmove",
    "panend",
    "pancancel",
    "panleft",
    "panright",
    "panup",
    "pandown",
    # pinch
    "pinch",
    "pinchstart",
    "pinchmove",
    "pinchend",
    "pinchcancel",
    "pinchin",
    "pinchout",
    # press
    "press",
    "pressup",
    # rotate
    "rotate",
    "rotatestart",
    "rotatemove",
    "rotateend",
    "rotatecancel",
    # swipe
    "swipe",
    "swipeleft",
    "swiperight",
    "swipeup",
    "swipedown",
    # tap
    "tap",
})


def is_recognized(name: str, custom_events: Iterable[str] = ()) -> bool:
    """Check whether an event name is a known gesture.

    Built-in names match case-insensitively. Custom names are compared
    exactly as they were configured.
    """
    return name.lower() in EVENT_NAMES or name in custom_events


class GestureNameRegistry:
    """Built-in gesture names plus an ordered list of custom ones."""

    def __init__(self, custom_events: Iterable[str] = ()):
        self._custom: list[str] = list(custom_events)

    def is_recognized(self, name: str) -> bool:
        return is_recognized(name, self._custom)

    def is_custom(self, name: str) -> bool:
        return name in self._custom

    @property
    def custom_events(self) -> list[str]:
        return list(self._custom)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_recognized(name)

    def __iter__(self) -> Iterator[str]:
        yield from sorted(EVENT_NAMES)
        for name in dict.fromkeys(self._custom):
            if name not in EVENT_NAMES:
                yield name

    def __len__(self) -> int:
        return sum(1 for _ in self)
