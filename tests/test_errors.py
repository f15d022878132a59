"""Tests for the givenwhen error hierarchy."""

from __future__ import annotations

from givenwhen import (
    ConfigError,
    DiffItem,
    DiffType,
    ErrorCode,
    ErrorContext,
    GivenWhenError,
    ScenarioAssertionError,
    ScenarioDefinitionError,
)


class TestErrorCode:
    def test_categories(self) -> None:
        assert ErrorCode.ASSERTION_FAILED.category == "assertion"
        assert ErrorCode.INVALID_CONFIG.category == "config"
        assert ErrorCode.MISSING_ASSERTION.category == "scenario"
        assert ErrorCode.UNKNOWN.category == "unknown"


class TestErrorContext:
    def test_empty_location(self) -> None:
        assert ErrorContext().format_location() == "unknown location"

    def test_location(self) -> None:
        context = ErrorContext(
            scenario="checkout", phase="then: should_equal(3)", steps=("add", "pay")
        )
        assert context.format_location() == "scenario=checkout > add -> pay > then: should_equal(3)"

    def test_to_dict_skips_empty_fields(self) -> None:
        data = ErrorContext(phase="then").to_dict()
        assert data["phase"] == "then"
        assert "scenario" not in data
        assert "steps" not in data
        assert "timestamp" in data


class TestGivenWhenError:
    def test_defaults(self) -> None:
        error = GivenWhenError()
        assert error.message == "An unexpected error occurred"
        assert error.error_code is ErrorCode.UNKNOWN
        assert str(error) == "[E999] An unexpected error occurred"

    def test_extra_context(self) -> None:
        error = GivenWhenError("boom", attempt=2)
        assert error.context.extra == {"attempt": 2}

    def test_str_includes_location(self) -> None:
        error = GivenWhenError("boom", context=ErrorContext(phase="then"))
        assert str(error) == "[E999] boom | at then"

    def test_custom_suggestions(self) -> None:
        error = ScenarioDefinitionError(suggestions=["do it right"])
        assert error.suggestions == ["do it right"]

    def test_default_suggestions_are_copies(self) -> None:
        error = ScenarioDefinitionError()
        error.suggestions.append("mutated")
        assert "mutated" not in ScenarioDefinitionError().suggestions

    def test_format_verbose(self) -> None:
        error = ConfigError("bad value", context=ErrorContext(scenario="s"))
        text = error.format_verbose()
        assert text.startswith("Error [E301]: bad value")
        assert "Location: scenario=s" in text
        assert "Suggestions:" in text

    def test_to_dict(self) -> None:
        cause = ValueError("root")
        data = ConfigError("bad", cause=cause).to_dict()
        assert data["error_type"] == "ConfigError"
        assert data["error_code"] == "E301"
        assert data["cause"] == "root"


class TestSubclasses:
    def test_assertion_error_is_builtin_assertion_error(self) -> None:
        assert issubclass(ScenarioAssertionError, AssertionError)
        assert issubclass(ScenarioAssertionError, GivenWhenError)

    def test_definition_error_is_type_error(self) -> None:
        assert issubclass(ScenarioDefinitionError, TypeError)

    def test_assertion_error_serializes_differences(self) -> None:
        error = ScenarioAssertionError(
            "mismatch",
            actual=1,
            expected=2,
            differences=[DiffItem("(root)", DiffType.CHANGED, 1, 2)],
        )
        data = error.to_dict()
        assert data["differences"] == [
            {"path": "(root)", "type": "changed", "actual": 1, "expected": 2}
        ]
        assert error.actual == 1
        assert error.expected == 2
