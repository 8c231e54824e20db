"""Tests for gesture config and engine building."""

import pytest
import yaml

from gesture_events.config import ConfigError, GestureConfig
from gesture_events.engine import GestureEngine
from gesture_events.runtime import EngineUnavailableError, install_engine


class TestValidation:
    def test_defaults(self):
        config = GestureConfig()
        assert config.events == []
        assert config.overrides == {}
        assert config.options is None

    def test_options_must_be_mapping(self):
        with pytest.raises(ConfigError):
            GestureConfig(options=["touch_action"])

    def test_overrides_must_be_mapping(self):
        with pytest.raises(ConfigError):
            GestureConfig(overrides=[("swipe", {})])

    def test_override_values_must_be_mappings(self):
        with pytest.raises(ConfigError):
            GestureConfig(overrides={"swipe": 6})

    def test_events_must_be_list_of_strings(self):
        with pytest.raises(ConfigError):
            GestureConfig(events="longpress")
        with pytest.raises(ConfigError):
            GestureConfig(events=["longpress", 3])

    def test_option_contents_not_checked(self):
        config = GestureConfig(options={"anything": object()}, overrides={"pan": {"x": None}})
        assert "anything" in config.options

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestBuildEngine:
    def test_pinch_and_rotate_always_enabled(self):
        config = GestureConfig(engine_factory=GestureEngine)
        engine = config.build_engine(object())
        assert engine.get("pinch").enabled
        assert engine.get("rotate").enabled

    def test_overrides_applied(self):
        config = GestureConfig(
            overrides={"swipe": {"direction": 31}, "pinch": {"enable": False}},
            engine_factory=GestureEngine,
        )
        engine = config.build_engine(object())
        assert engine.get("swipe").options["direction"] == 31
        # Overrides come after the forced flags.
        assert not engine.get("pinch").enabled

    def test_base_options_and_element(self):
        element = object()
        options = {"touch_action": "pan-y"}
        engine = GestureConfig(options=options, engine_factory=GestureEngine).build_engine(element)
        assert engine.element is element
        assert engine.options == options
        assert engine.options is not options

    def test_one_engine_per_call(self):
        config = GestureConfig(engine_factory=GestureEngine)
        element = object()
        assert config.build_engine(element) is not config.build_engine(element)

    def test_uses_installed_engine(self):
        install_engine(GestureEngine)
        assert isinstance(GestureConfig().build_engine(object()), GestureEngine)

    def test_no_engine(self):
        with pytest.raises(EngineUnavailableError):
            GestureConfig().build_engine(object())

    def test_constructor_error_propagates(self):
        def broken(element, options):
            raise RuntimeError("no pointer input")

        with pytest.raises(RuntimeError, match="no pointer input"):
            GestureConfig(engine_factory=broken).build_engine(object())

    def test_unknown_override_propagates(self):
        config = GestureConfig(overrides={"doubletap": {}}, engine_factory=GestureEngine)
        with pytest.raises(KeyError):
            config.build_engine(object())


class TestSerialization:
    def test_from_dict(self):
        config = GestureConfig.from_dict({
            "options": {"touch_action": "auto"},
            "overrides": {"pan": {"threshold": 20}},
            "events": ["longpress"],
        })
        assert config.options == {"touch_action": "auto"}
        assert config.overrides["pan"]["threshold"] == 20
        assert config.events == ["longpress"]

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(ConfigError):
            GestureConfig.from_dict(["pan"])

    def test_yaml_roundtrip(self, tmp_path):
        path = tmp_path / "gestures.yml"
        config = GestureConfig(
            events=["longpress"],
            overrides={"swipe": {"direction": 6}},
            options={"touch_action": "auto"},
        )
        config.to_yaml(path)
        loaded = GestureConfig.from_yaml(path)
        assert loaded == config

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert GestureConfig.from_yaml(path) == GestureConfig()

    def test_bad_yaml_shape(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text(yaml.dump({"overrides": {"swipe": "fast"}}))
        with pytest.raises(ConfigError):
            GestureConfig.from_yaml(path)
