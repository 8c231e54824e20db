"""Tests for lazy gesture engine loaders."""

import sys

import pytest

from gesture_events.loaders import file_loader, module_loader
from gesture_events.runtime import get_engine_factory, install_engine, is_engine_available

ENGINE_MODULE = """
from gesture_events.engine import GestureEngine
from gesture_events.runtime import install_engine

install_engine(GestureEngine)
"""

FACTORY_MODULE = """
from gesture_events.engine import GestureEngine

def engine_factory(element, options):
    return GestureEngine(element, options)
"""


class TestFileLoader:
    def test_import_side_effect_installs(self, tmp_path, loop):
        path = tmp_path / "engine_side_effect.py"
        path.write_text(ENGINE_MODULE)

        loop.run_until_complete(file_loader(path)())
        assert is_engine_available()

    def test_module_factory_installed(self, tmp_path, loop):
        path = tmp_path / "engine_factory_mod.py"
        path.write_text(FACTORY_MODULE)

        loop.run_until_complete(file_loader(path)())
        assert get_engine_factory().__name__ == "engine_factory"

    def test_existing_engine_kept(self, tmp_path, loop):
        def mine(element, options):
            return None

        install_engine(mine)
        path = tmp_path / "engine_other.py"
        path.write_text(FACTORY_MODULE)

        loop.run_until_complete(file_loader(path)())
        assert get_engine_factory() is mine

    def test_missing_file(self, tmp_path, loop):
        with pytest.raises(FileNotFoundError):
            loop.run_until_complete(file_loader(tmp_path / "nope.py")())

    def test_module_without_engine(self, tmp_path, loop):
        path = tmp_path / "engine_empty.py"
        path.write_text("VALUE = 1\n")

        loop.run_until_complete(file_loader(path)())
        assert not is_engine_available()

    def test_broken_file_not_left_in_sys_modules(self, tmp_path, loop):
        path = tmp_path / "engine_broken.py"
        path.write_text("raise RuntimeError('bad engine')\n")

        with pytest.raises(RuntimeError):
            loop.run_until_complete(file_loader(path)())
        assert "gesture_engine_engine_broken" not in sys.modules


class TestModuleLoader:
    def test_imports_module(self, tmp_path, loop, monkeypatch):
        (tmp_path / "lazy_gesture_engine_pkg.py").write_text(ENGINE_MODULE)
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "lazy_gesture_engine_pkg", raising=False)

        loop.run_until_complete(module_loader("lazy_gesture_engine_pkg")())
        assert is_engine_available()
        sys.modules.pop("lazy_gesture_engine_pkg", None)

    def test_missing_module(self, loop):
        with pytest.raises(ImportError):
            loop.run_until_complete(module_loader("no_such_gesture_engine_xyz")())
