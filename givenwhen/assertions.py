"""Assertion helpers for scenario chains.

``should_equal`` and ``should_contain`` turn an expected value into a
one-argument assertion suitable as the last argument of ``.then()``.

Example:
    >>> given({"count": 1, "busy": False}).then(should_contain({"count": 1}))
    >>> given([1, 2]).then(len, should_equal(2))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from givenwhen.config import get_config
from givenwhen.diff import StructuralDiff, shorten
from givenwhen.errors import ErrorCode, ScenarioAssertionError, ScenarioDefinitionError

logger = logging.getLogger(__name__)

Assertion = Callable[[Any], None]


def deep_equal(actual: Any, expected: Any, error_code: ErrorCode = ErrorCode.VALUE_MISMATCH) -> None:
    """Assert ``actual`` is structurally equal to ``expected``.

    Raises:
        ScenarioAssertionError: Listing where the two values differ.
    """
    differences = StructuralDiff().compare(actual, expected)
    if not differences:
        return

    config = get_config()
    limit = config.max_repr_length
    lines = [
        f"Expected {shorten(repr(expected), limit)}, got {shorten(repr(actual), limit)}",
    ]
    for item in differences[: config.max_diff_items]:
        lines.append(f"  {item.describe(limit)}")
    hidden = len(differences) - config.max_diff_items
    if hidden > 0:
        lines.append(f"  ... and {hidden} more difference(s)")

    logger.debug(f"Structural mismatch with {len(differences)} difference(s)")
    raise ScenarioAssertionError(
        "\n".join(lines),
        actual=actual,
        expected=expected,
        differences=differences,
        error_code=error_code,
    )


def pick(obj: Any, keys: Iterable[Any]) -> dict[Any, Any]:
    """Return a dict of the given keys present on ``obj``.

    Mappings are read by key, other objects by attribute. Absent keys are
    left out rather than reported.
    """
    picked: dict[Any, Any] = {}
    for k in keys:
        if isinstance(obj, Mapping):
            if k in obj:
                picked[k] = obj[k]
        elif isinstance(k, str) and hasattr(obj, k):
            picked[k] = getattr(obj, k)
    return picked


def should_equal(expected: Any) -> Assertion:
    """Assertion passing when the value is structurally equal to ``expected``."""

    def assertion(actual: Any) -> None:
        deep_equal(actual, expected)

    assertion.description = f"should_equal({expected!r})"  # type: ignore[attr-defined]
    return assertion


def should_contain(expected: Mapping[Any, Any]) -> Assertion:
    """Assertion passing when the value holds every top-level entry of ``expected``.

    Only the top-level keys of ``expected`` are picked from the actual value;
    each picked value must then be deeply equal to its expected counterpart.
    Extra keys on the actual value are ignored, nested values are not
    partially matched.

    Raises:
        ScenarioDefinitionError: If ``expected`` is not a mapping.
    """
    if not isinstance(expected, Mapping):
        raise ScenarioDefinitionError(
            f"should_contain expects a mapping, got {type(expected).__name__}",
            error_code=ErrorCode.INVALID_EXPECTATION,
        )

    expected_keys = list(expected.keys())

    def assertion(actual: Any) -> None:
        deep_equal(pick(actual, expected_keys), dict(expected), error_code=ErrorCode.SUBSET_MISMATCH)

    assertion.description = f"should_contain({dict(expected)!r})"  # type: ignore[attr-defined]
    return assertion
