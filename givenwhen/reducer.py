"""Adapter turning a reducer into a scenario starting point.

A reducer is a pure ``(state, action) -> state`` function. It is called
with ``None`` as the state once, with ``INIT_ACTION``, to obtain its initial
state; reducers are expected to fall back to their default when handed
``None``.

Example:
    >>> counter = with_reducer(counter_reducer)
    >>> (
    ...     given(counter.initial_state)
    ...     .when(counter.dispatch({"type": "INCREMENT"}))
    ...     .then(state, should_equal(1))
    ... )
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from givenwhen.scenario import Given

logger = logging.getLogger(__name__)

Reducer = Callable[[Any, Any], Any]

INIT_ACTION: Mapping[str, str] = {"type": "@@givenwhen/INIT"}


@dataclass(frozen=True)
class Dispatch:
    """Transformer applying one action through a reducer."""

    reducer: Reducer
    action: Any

    def __call__(self, state: Any) -> Any:
        return self.reducer(state, self.action)

    @property
    def description(self) -> str:
        if isinstance(self.action, Mapping) and "type" in self.action:
            return f"dispatch({self.action['type']})"
        return f"dispatch({self.action!r})"


@dataclass(frozen=True)
class ReducerHarness:
    """A reducer's initial state plus a ``dispatch`` transformer factory."""

    reducer: Reducer
    initial_state: Any

    def dispatch(self, action: Any) -> Dispatch:
        """Transformer ``state -> reducer(state, action)`` for ``.when``/``.and_``."""
        return Dispatch(self.reducer, action)

    def given(self, *, name: str | None = None) -> Given:
        """Start a scenario from the reducer's initial state."""
        from givenwhen.scenario import given

        return given(self.initial_state, name=name)


def with_reducer(reducer: Reducer) -> ReducerHarness:
    """Wrap ``reducer``, computing its initial state once."""
    initial_state = reducer(None, INIT_ACTION)
    logger.debug(f"Initialized reducer {getattr(reducer, '__name__', reducer)!s}")
    return ReducerHarness(reducer=reducer, initial_state=initial_state)
