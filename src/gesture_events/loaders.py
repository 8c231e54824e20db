"""Lazy gesture engine loaders.

A loader is a zero-argument callable returning an awaitable that
completes once the gesture engine has been loaded. Loading a module is
expected to install the engine as a side effect; as a fallback, a
module-level ``engine_factory`` callable is installed if nothing else was.

    plugin = GesturesPlugin(config, loader=module_loader("my_app.gesture_engine"))
"""

from __future__ import annotations

import asyncio
import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Awaitable, Callable

from gesture_events.runtime import install_engine, is_engine_available

logger = logging.getLogger("gesture_events.loaders")

EngineLoader = Callable[[], Awaitable[None]]


def _install_from_module(module: ModuleType):
    if is_engine_available():
        return
    factory = getattr(module, "engine_factory", None)
    if callable(factory):
        install_engine(factory)
    else:
        logger.debug("Module %s did not install a gesture engine", module.__name__)


def _exec_file(path: Path) -> ModuleType:
    module_name = f"gesture_engine_{path.stem}"

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load gesture engine from {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


def module_loader(module_name: str) -> EngineLoader:
    """Loader that imports ``module_name`` in the default executor."""

    async def load():
        loop = asyncio.get_running_loop()
        module = await loop.run_in_executor(None, importlib.import_module, module_name)
        logger.info("Loaded gesture engine module %s", module_name)
        _install_from_module(module)

    return load


def file_loader(path: str | Path) -> EngineLoader:
    """Loader that executes a Python file defining a gesture engine."""
    path = Path(path)

    async def load():
        if not path.is_file():
            raise FileNotFoundError(f"Gesture engine file not found: {path}")
        loop = asyncio.get_running_loop()
        module = await loop.run_in_executor(None, _exec_file, path)
        logger.info("Loaded gesture engine file %s", path.name)
        _install_from_module(module)

    return load
