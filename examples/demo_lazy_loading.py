#!/usr/bin/env python3
"""Lazy loading demo: bind gesture listeners before the engine exists.

Registers a few listeners while no gesture engine is installed, loads the
reference engine after a short delay, then emits synthetic gestures.
One registration is cancelled before the engine arrives and never fires.

Usage:
    python examples/demo_lazy_loading.py
    python examples/demo_lazy_loading.py --delay 0.5 --config gestures.yml
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gesture_events import EventManager, GestureConfig, GestureEngine, GesturesPlugin
from gesture_events.runtime import install_engine


async def main(delay: float, config: GestureConfig):
    engines: list[GestureEngine] = []

    def engine_factory(element, options):
        engine = GestureEngine(element, options)
        engines.append(engine)
        return engine

    async def loader():
        await asyncio.sleep(delay)
        install_engine(engine_factory)

    manager = EventManager([GesturesPlugin(config, loader=loader)])

    manager.add_event_listener("canvas", "swipeleft", lambda e: print(f"swipeleft: {e}"))
    manager.add_event_listener("canvas", "pinchout", lambda e: print(f"pinchout: {e}"))
    cancel = manager.add_event_listener("canvas", "tap", lambda e: print(f"tap: {e}"))
    cancel()

    print(f"Waiting {delay:.2f}s for the gesture engine...")
    await asyncio.sleep(delay + 0.05)
    print(f"Engines bound: {len(engines)}")

    for engine in engines:
        engine.emit("swipeleft", {"deltaX": -140, "velocity": 1.1})
        engine.emit("pinchout", {"scale": 1.4})
        engine.emit("tap", {"tapCount": 1})


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Lazy gesture engine loading demo")
    parser.add_argument("--delay", type=float, default=0.2, help="Engine load delay (seconds)")
    parser.add_argument("--config", type=Path, default=None, help="Gesture config YAML")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s %(message)s")
    config = GestureConfig.from_yaml(args.config) if args.config else GestureConfig()
    asyncio.run(main(args.delay, config))
