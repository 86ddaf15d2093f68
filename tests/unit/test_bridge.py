"""
Unit tests for OptionBridge.

Tests verify:
- Non-string names short-circuit without calling any binding
- String names are passed through to the binding unchanged
- Binding reassignment only affects later calls
- Default bindings are the platform functions
- Strict mode raises InvalidOptionNameError
"""

from unittest.mock import MagicMock

import pytest
from dependency_injector import providers

from optbridge import platform
from optbridge.bridge import OptionBridge
from optbridge.core.bootstrap import bootstrap
from optbridge.core.exceptions import InvalidOptionNameError
from optbridge.core.interfaces.logger import ILogger
from optbridge.core.settings import load_settings

NON_STRING_NAMES = [
    42,
    3.14,
    ["site_title"],
    {"name": "site_title"},
    None,
    True,
    b"site_title",
    ("site_title",),
]


@pytest.fixture
def logger():
    return MagicMock(spec=ILogger)


@pytest.fixture
def bindings():
    """Stub bindings for all four operations."""
    return {
        "read_function": MagicMock(return_value="stored"),
        "create_function": MagicMock(return_value=True),
        "update_function": MagicMock(return_value=True),
        "delete_function": MagicMock(return_value=True),
    }


@pytest.fixture
def bridge(bindings, logger):
    return OptionBridge(**bindings, logger=logger)


def _assert_no_binding_called(bindings):
    for fn in bindings.values():
        fn.assert_not_called()


class TestInvalidNames:
    """Non-string names never reach the bindings."""

    @pytest.mark.parametrize("name", NON_STRING_NAMES)
    def test_get_returns_default(self, bridge, bindings, name):
        sentinel = object()
        assert bridge.get(name, sentinel) is sentinel
        _assert_no_binding_called(bindings)

    @pytest.mark.parametrize("name", NON_STRING_NAMES)
    def test_add_returns_false(self, bridge, bindings, name):
        assert bridge.add(name, "value") is False
        _assert_no_binding_called(bindings)

    @pytest.mark.parametrize("name", NON_STRING_NAMES)
    def test_update_returns_false(self, bridge, bindings, name):
        assert bridge.update(name, "value") is False
        _assert_no_binding_called(bindings)

    @pytest.mark.parametrize("name", NON_STRING_NAMES)
    def test_delete_returns_false(self, bridge, bindings, name):
        assert bridge.delete(name) is False
        _assert_no_binding_called(bindings)

    def test_get_default_defaults_to_false(self, bridge):
        assert bridge.get(42) is False

    @pytest.mark.parametrize(
        ("call", "action"),
        [
            (lambda b: b.get(42, None), "retrieval"),
            (lambda b: b.add(42, 1), "adding"),
            (lambda b: b.update(42, 1), "updating"),
            (lambda b: b.delete(42), "deletion"),
        ],
    )
    def test_diagnostic_names_operation_and_type(self, bridge, logger, call, action):
        call(bridge)
        logger.warning.assert_called_once_with(
            f"OptionBridge: Option name must be a string for {action}. Given: int"
        )

    def test_diagnostic_reports_runtime_type(self, bridge, logger):
        bridge.add(None, 1)
        bridge.add(["a"], 1)
        messages = [c.args[0] for c in logger.warning.call_args_list]
        assert messages[0].endswith("Given: NoneType")
        assert messages[1].endswith("Given: list")

    def test_valid_name_logs_nothing(self, bridge, logger):
        bridge.get("site_title")
        logger.warning.assert_not_called()


class TestPassThrough:
    """String names invoke the binding exactly once and return its result."""

    def test_get_calls_read_binding(self, bridge, bindings):
        assert bridge.get("site_title", "Untitled") == "stored"
        bindings["read_function"].assert_called_once_with("site_title", "Untitled")

    def test_get_passes_default_false_when_omitted(self, bridge, bindings):
        bridge.get("site_title")
        bindings["read_function"].assert_called_once_with("site_title", False)

    def test_add_calls_create_binding(self, bridge, bindings):
        assert bridge.add("quota", 100) is True
        bindings["create_function"].assert_called_once_with("quota", 100)

    def test_update_calls_update_binding(self, bridge, bindings):
        assert bridge.update("quota", 200) is True
        bindings["update_function"].assert_called_once_with("quota", 200)

    def test_delete_calls_delete_binding_with_name_only(self, bridge, bindings):
        assert bridge.delete("quota") is True
        bindings["delete_function"].assert_called_once_with("quota")

    def test_results_are_returned_unchanged(self, bindings, logger):
        result = {"nested": [1, 2]}
        bindings["read_function"].return_value = result
        bindings["update_function"].return_value = "not-a-bool"
        bridge = OptionBridge(**bindings, logger=logger)

        assert bridge.get("x") is result
        assert bridge.update("x", 1) == "not-a-bool"

    def test_binding_exceptions_propagate(self, bindings, logger):
        bindings["create_function"].side_effect = RuntimeError("store offline")
        bridge = OptionBridge(**bindings, logger=logger)

        with pytest.raises(RuntimeError, match="store offline"):
            bridge.add("quota", 1)

    def test_str_subclass_is_accepted(self, bridge, bindings):
        class OptionName(str):
            pass

        bridge.delete(OptionName("legacy_flag"))
        bindings["delete_function"].assert_called_once_with("legacy_flag")

    def test_empty_string_is_passed_through(self, bridge, bindings):
        bridge.get("", "fallback")
        bindings["read_function"].assert_called_once_with("", "fallback")


class TestScenarios:
    """Concrete usage scenarios."""

    def test_stub_read_returns_stored_title(self, logger):
        def read(name, default):
            return {"site_title": "My Blog"}.get(name, default)

        bridge = OptionBridge(read, logger=logger)
        assert bridge.get("site_title", "Untitled") == "My Blog"

    def test_numeric_name_returns_fallback_without_reading(self, logger):
        read = MagicMock()
        bridge = OptionBridge(read, logger=logger)

        assert bridge.get(42, "fallback") == "fallback"
        read.assert_not_called()

    def test_failed_create_passes_through(self, logger):
        bridge = OptionBridge(logger=logger)
        bridge.set_create_function(lambda name, value: False)

        assert bridge.add("quota", 100) is False

    def test_delete_with_stub_returns_true(self, logger):
        bridge = OptionBridge(logger=logger)
        bridge.set_delete_function(lambda name: True)

        assert bridge.delete("legacy_flag") is True


class TestBindings:
    """Default bindings and reassignment."""

    def test_defaults_are_platform_functions(self):
        bridge = OptionBridge()
        assert bridge.read_function is platform.get_option
        assert bridge.create_function is platform.add_option
        assert bridge.update_function is platform.update_option
        assert bridge.delete_function is platform.delete_option

    def test_constructor_read_function(self):
        read = MagicMock()
        bridge = OptionBridge(read)
        assert bridge.read_function is read
        assert bridge.create_function is platform.add_option

    def test_setters_replace_bindings(self):
        bridge = OptionBridge()
        fns = [MagicMock(), MagicMock(), MagicMock(), MagicMock()]
        bridge.set_read_function(fns[0])
        bridge.set_create_function(fns[1])
        bridge.set_update_function(fns[2])
        bridge.set_delete_function(fns[3])

        assert bridge.read_function is fns[0]
        assert bridge.create_function is fns[1]
        assert bridge.update_function is fns[2]
        assert bridge.delete_function is fns[3]

    def test_reassignment_affects_only_later_calls(self, logger):
        first = MagicMock(return_value="first")
        second = MagicMock(return_value="second")
        bridge = OptionBridge(first, logger=logger)

        before = bridge.get("site_title")
        bridge.set_read_function(second)
        after = bridge.get("site_title")

        assert before == "first"
        assert after == "second"
        first.assert_called_once_with("site_title", False)
        second.assert_called_once_with("site_title", False)

    def test_setter_does_not_validate_callable(self):
        bridge = OptionBridge()
        bridge.set_update_function("not callable")  # type: ignore[arg-type]
        assert bridge.update_function == "not callable"

    def test_default_bindings_hit_platform_store(self, memory_store):
        bridge = OptionBridge()

        assert bridge.add("blogname", "My Blog") is True
        assert bridge.get("blogname") == "My Blog"
        assert bridge.update("blogname", "Renamed") is True
        assert memory_store.get("blogname") == (True, "Renamed")
        assert bridge.delete("blogname") is True
        assert bridge.get("blogname", "gone") == "gone"


class TestStrictMode:
    """strict=True raises instead of logging."""

    def test_raises_invalid_option_name(self, bindings, logger):
        bridge = OptionBridge(**bindings, logger=logger, strict=True)

        with pytest.raises(InvalidOptionNameError) as exc_info:
            bridge.update(7, "value")

        assert exc_info.value.operation == "update"
        assert exc_info.value.given_type == "int"
        assert "for updating" in str(exc_info.value)
        _assert_no_binding_called(bindings)
        logger.warning.assert_not_called()

    def test_invalid_option_name_is_value_error(self, bindings):
        bridge = OptionBridge(**bindings, strict=True)
        with pytest.raises(ValueError):
            bridge.get(None)

    def test_from_settings_reads_strict_flag(self):
        settings = load_settings(bridge={"strict_names": True})
        bridge = OptionBridge.from_settings(settings)
        assert bridge.strict is True


class TestLoggerResolution:
    """Without an injected logger the bridge uses the container's."""

    def test_uses_container_logger(self, bindings):
        container = bootstrap(load_settings())
        container_logger = MagicMock(spec=ILogger)
        container.override(ILogger, providers.Object(container_logger))

        bridge = OptionBridge(**bindings)
        bridge.add(1.5, "value")

        container_logger.warning.assert_called_once_with(
            "OptionBridge: Option name must be a string for adding. Given: float"
        )

    def test_reports_on_stderr_without_bootstrap(self, bindings, capsys):
        bridge = OptionBridge(**bindings)

        assert bridge.get(42, "fallback") == "fallback"

        err = capsys.readouterr().err
        assert "OptionBridge: Option name must be a string for retrieval. Given: int" in err
        assert "[WARNING]" in err

    def test_stderr_fallback_honors_environment(self, bindings, capsys, monkeypatch):
        monkeypatch.setenv("OPTBRIDGE_LOGGING__CONSOLE", "false")
        bootstrap()

        OptionBridge(**bindings).delete(None)

        assert capsys.readouterr().err == ""
