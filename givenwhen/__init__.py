"""givenwhen - Given-When-Then scenarios for reducers and other pure state transitions.

Example:
    >>> from givenwhen import given, should_equal, state, with_reducer
    >>>
    >>> counter = with_reducer(counter_reducer)
    >>> (
    ...     given(counter.initial_state)
    ...     .when(counter.dispatch({"type": "INCREMENT"}))
    ...     .then(state, should_equal(1))
    ... )
"""

from givenwhen.assertions import deep_equal, pick, should_contain, should_equal
from givenwhen.config import GivenWhenConfig, configure, get_config, load_config
from givenwhen.diff import DiffItem, DiffType, StructuralDiff, is_equal
from givenwhen.errors import (
    ConfigError,
    ErrorCode,
    ErrorContext,
    GivenWhenError,
    ScenarioAssertionError,
    ScenarioDefinitionError,
)
from givenwhen.reducer import INIT_ACTION, Dispatch, ReducerHarness, with_reducer
from givenwhen.reporting import render_failure
from givenwhen.scenario import Given, Then, When, given
from givenwhen.selectors import key, pipeline, state

__version__ = "0.1.0"

__all__ = [
    # Scenario chain
    "given",
    "Given",
    "When",
    "Then",
    # Assertions and selectors
    "should_equal",
    "should_contain",
    "deep_equal",
    "pick",
    "state",
    "pipeline",
    "key",
    # Reducers
    "with_reducer",
    "ReducerHarness",
    "Dispatch",
    "INIT_ACTION",
    # Diffing
    "StructuralDiff",
    "DiffItem",
    "DiffType",
    "is_equal",
    # Errors
    "GivenWhenError",
    "ScenarioAssertionError",
    "ScenarioDefinitionError",
    "ConfigError",
    "ErrorCode",
    "ErrorContext",
    # Configuration
    "GivenWhenConfig",
    "load_config",
    "get_config",
    "configure",
    "render_failure",
]
