"""Given-When-Then scenario chain.

A scenario starts with ``given(state)`` and threads that state through
transformers (``.and_`` / ``.when``) before asserting on it (``.then``)::

    given(0).when(increment).and_(increment).then(state, should_equal(2))

Every node is an immutable value: each call returns a new node carrying the
new state, and a ``Then`` keeps the exact state it was created with, so
further ``.and_`` assertions on it never re-run transformers.

``.then(*selectors, assertion)`` pipes the state through the selectors
(left to right) and hands the result to the assertion, once, before
returning. The assertion signals failure by raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from givenwhen.errors import ErrorCode, ScenarioAssertionError, ScenarioDefinitionError
from givenwhen.observability.logging import log_context
from givenwhen.selectors import describe, pipeline

logger = logging.getLogger(__name__)

Transformer = Callable[[Any], Any]


def _require_callable(fn: Any, role: str) -> None:
    if not callable(fn):
        raise ScenarioDefinitionError(
            f"{role} must be callable, got {type(fn).__name__}: {fn!r}",
            error_code=ErrorCode.NOT_CALLABLE,
        )


@dataclass(frozen=True)
class _Node:
    state: Any
    name: str | None = None
    steps: tuple[str, ...] = ()

    def _apply(self, transformer: Transformer, phase: str) -> tuple[Any, tuple[str, ...]]:
        _require_callable(transformer, "Transformer")
        label = describe(transformer)
        logger.debug(
            f"{phase}: {label}",
            extra={"structured_data": {"phase": phase, "step": label, "position": len(self.steps) + 1}},
        )
        return transformer(self.state), self.steps + (label,)

    def _check(self, args: tuple[Callable[..., Any], ...], phase: str) -> Then:
        if not args:
            raise ScenarioDefinitionError(
                f"{phase}() needs at least an assertion",
                error_code=ErrorCode.MISSING_ASSERTION,
            )
        for arg in args:
            _require_callable(arg, "Selector or assertion")

        *selectors, assertion = args
        select = pipeline(*selectors)
        selector_label, assertion_label = describe(select), describe(assertion)
        logger.debug(
            f"{phase}: {selector_label} -> {assertion_label}",
            extra={
                "structured_data": {
                    "phase": phase,
                    "selector": selector_label,
                    "assertion": assertion_label,
                    "steps": len(self.steps),
                }
            },
        )

        with log_context(scenario=self.name, phase=phase):
            try:
                assertion(select(self.state))
            except ScenarioAssertionError as error:
                error.context.scenario = self.name
                error.context.phase = f"{phase}: {assertion_label}"
                error.context.steps = self.steps
                raise

        return Then(self.state, self.name, self.steps)


@dataclass(frozen=True)
class Given(_Node):
    """Setup phase: ``and_`` adds setup steps, ``when`` starts the action."""

    def and_(self, transformer: Transformer) -> Given:
        state, steps = self._apply(transformer, "given")
        return Given(state, self.name, steps)

    def when(self, transformer: Transformer) -> When:
        state, steps = self._apply(transformer, "when")
        return When(state, self.name, steps)

    def then(self, *args: Callable[..., Any]) -> Then:
        return self._check(args, "then")


@dataclass(frozen=True)
class When(_Node):
    """Action phase: ``and_`` chains further actions."""

    def and_(self, transformer: Transformer) -> When:
        state, steps = self._apply(transformer, "when")
        return When(state, self.name, steps)

    def then(self, *args: Callable[..., Any]) -> Then:
        return self._check(args, "then")


@dataclass(frozen=True)
class Then(_Node):
    """Assertion phase: ``and_`` asserts again on the same state."""

    def and_(self, *args: Callable[..., Any]) -> Then:
        return self._check(args, "and")

    def when(self, transformer: Transformer) -> When:
        state, steps = self._apply(transformer, "when")
        return When(state, self.name, steps)


def given(initial_state: Any, *, name: str | None = None) -> Given:
    """Start a scenario from ``initial_state``."""
    logger.debug("given: %r%s", initial_state, f" ({name})" if name else "")
    return Given(initial_state, name)
