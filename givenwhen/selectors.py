"""Selectors: functions projecting a state value for an assertion."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

Selector = Callable[[Any], Any]


def state(x: Any) -> Any:
    """Identity selector, for reading ``.then(state, should_equal(1))`` aloud."""
    return x


def pipeline(*selectors: Selector) -> Selector:
    """Compose selectors left to right.

    ``pipeline(f, g)(x)`` is ``g(f(x))``; ``pipeline()`` is the identity.
    """

    def run(value: Any) -> Any:
        for selector in selectors:
            value = selector(value)
        return value

    run.description = " | ".join(describe(s) for s in selectors) or "state"  # type: ignore[attr-defined]
    return run


def key(*names: Any) -> Selector:
    """Selector reading a nested path of keys (or attributes).

    Example:
        >>> key("user", "name")({"user": {"name": "ada"}})
        'ada'
    """

    def select(value: Any) -> Any:
        for name in names:
            if isinstance(value, Mapping):
                value = value[name]
            else:
                value = getattr(value, name)
        return value

    select.description = "key(" + ", ".join(repr(n) for n in names) + ")"  # type: ignore[attr-defined]
    return select


def describe(fn: Callable[..., Any]) -> str:
    """Readable label for a transformer, selector or assertion."""
    description = getattr(fn, "description", None)
    if isinstance(description, str) and description:
        return description
    name = getattr(fn, "__name__", None)
    if name:
        return name
    return repr(fn)
