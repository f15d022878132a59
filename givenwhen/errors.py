"""Exception hierarchy for givenwhen.

All givenwhen errors inherit from GivenWhenError and include:
- error_code: A unique ErrorCode enum for categorization
- context: ErrorContext with scenario/phase/step details
- suggestions: List of actionable steps to resolve the issue

Assertion failures additionally subclass the builtin ``AssertionError`` so
that pytest reports them as ordinary test failures, and definition errors
subclass ``TypeError``.

Example:
    try:
        given(0).when(increment).then(should_equal(2))
    except ScenarioAssertionError as e:
        print(e.format_verbose())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from givenwhen.diff import DiffItem


class ErrorCode(Enum):
    """Standardized error codes for givenwhen.

    Error codes are organized by category:
    - E2xx: Assertion errors
    - E3xx: Configuration errors
    - E4xx: Scenario definition errors
    - E9xx: Unknown/internal errors
    """

    # Assertion errors (E2xx)
    ASSERTION_FAILED = "E201"
    VALUE_MISMATCH = "E202"
    SUBSET_MISMATCH = "E203"

    # Configuration errors (E3xx)
    INVALID_CONFIG = "E301"
    CONFIG_NOT_READABLE = "E302"

    # Scenario definition errors (E4xx)
    INVALID_SCENARIO = "E401"
    MISSING_ASSERTION = "E402"
    NOT_CALLABLE = "E403"
    INVALID_EXPECTATION = "E404"

    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if 200 <= code_num < 300:
            return "assertion"
        elif 300 <= code_num < 400:
            return "config"
        elif 400 <= code_num < 500:
            return "scenario"
        else:
            return "unknown"


@dataclass
class ErrorContext:
    """Where in a scenario an error happened.

    Attributes:
        scenario: Name given to the scenario, if any.
        phase: Assertion step that failed, as the chain phase plus the
            assertion label (e.g. "then: should_equal(3)" or "and: ...").
        steps: Labels of the transformers applied before the failure.
        extra: Additional context-specific information.
        timestamp: When the error occurred.
    """

    scenario: str | None = None
    phase: str | None = None
    steps: tuple[str, ...] = ()
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "scenario": self.scenario,
            "phase": self.phase,
            "steps": list(self.steps) or None,
            "extra": self.extra or None,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the error location as a readable string."""
        parts = []
        if self.scenario:
            parts.append(f"scenario={self.scenario}")
        if self.steps:
            parts.append(" -> ".join(self.steps))
        if self.phase:
            parts.append(self.phase)
        return " > ".join(parts) if parts else "unknown location"


class GivenWhenError(Exception):
    """Base exception for all givenwhen errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with scenario details
        suggestions: List of actionable steps to resolve the issue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
        ]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Location: {location}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class ScenarioAssertionError(GivenWhenError, AssertionError):
    """An assertion in a ``then``/``and_`` step did not hold.

    Attributes:
        actual: The value the assertion received.
        expected: The value it was compared against.
        differences: Structural differences between the two, if computed.
    """

    error_code = ErrorCode.ASSERTION_FAILED
    default_message = "Assertion failed"

    def __init__(
        self,
        message: str | None = None,
        actual: Any = None,
        expected: Any = None,
        differences: list[DiffItem] | None = None,
        **kwargs: Any,
    ) -> None:
        self.actual = actual
        self.expected = expected
        self.differences = list(differences or [])
        super().__init__(message, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["differences"] = [item.to_dict() for item in self.differences]
        return result


class ScenarioDefinitionError(GivenWhenError, TypeError):
    """A scenario chain was called with arguments it cannot use."""

    error_code = ErrorCode.INVALID_SCENARIO
    default_message = "Invalid scenario definition"
    default_suggestions = [
        "Pass transformers to given(...).and_()/.when() as callables taking the state",
        "The last argument of .then()/.and_() on a Then must be the assertion",
    ]


class ConfigError(GivenWhenError):
    """Configuration could not be read or did not validate."""

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid givenwhen configuration"
    default_suggestions = [
        "Check GIVENWHEN_* environment variables",
        "Validate the YAML configuration file syntax",
    ]
