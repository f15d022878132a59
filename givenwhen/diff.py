"""Structural comparison of state values.

This module is the deep-equality primitive behind ``should_equal`` and
``should_contain``. It walks two values side by side and reports every
place where they differ, with a path pointing at the difference.

Example:
    >>> from givenwhen.diff import StructuralDiff
    >>>
    >>> items = StructuralDiff().compare({"a": 1, "b": [1, 2]}, {"a": 1, "b": [1, 3]})
    >>> for item in items:
    ...     print(item.describe())
    b[1]: expected 3, got 2
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class DiffType(Enum):
    """Kinds of structural differences."""

    MISSING = "missing"
    UNEXPECTED = "unexpected"
    CHANGED = "changed"
    TYPE_CHANGED = "type_changed"


@dataclass(frozen=True)
class DiffItem:
    """A single difference found between an actual and an expected value.

    Attributes:
        path: Path to the differing value (e.g., "user.address.city").
        diff_type: Type of difference.
        actual: Value found in the actual data (None when missing).
        expected: Value found in the expected data (None when unexpected).
    """

    path: str
    diff_type: DiffType
    actual: Any = None
    expected: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "path": self.path,
            "type": self.diff_type.value,
            "actual": self.actual,
            "expected": self.expected,
        }

    def describe(self, max_length: int | None = None) -> str:
        """One-line human description of this difference."""
        actual = shorten(repr(self.actual), max_length)
        expected = shorten(repr(self.expected), max_length)
        if self.diff_type is DiffType.MISSING:
            return f"{self.path}: missing, expected {expected}"
        if self.diff_type is DiffType.UNEXPECTED:
            return f"{self.path}: unexpected {actual}"
        if self.diff_type is DiffType.TYPE_CHANGED:
            return (
                f"{self.path}: expected {type(self.expected).__name__} {expected}, "
                f"got {type(self.actual).__name__} {actual}"
            )
        return f"{self.path}: expected {expected}, got {actual}"


def shorten(text: str, max_length: int | None) -> str:
    """Truncate ``text`` to ``max_length`` characters with an ellipsis."""
    if max_length is None or len(text) <= max_length:
        return text
    return text[: max(max_length - 3, 0)] + "..."


class StructuralDiff:
    """Deep comparison of plain Python values.

    Mappings are compared key by key regardless of their concrete class.
    Lists and tuples are compared index by index, but a list never equals a
    tuple. Everything else must have exactly the same type and compare
    equal with ``==``. A value always equals itself, and two float NaNs are
    treated as equal.

    Example:
        >>> diff = StructuralDiff()
        >>> diff.compare({"count": 1}, {"count": 1})
        []
    """

    def __init__(self, max_depth: int = 50) -> None:
        """Initialize the comparison.

        Args:
            max_depth: Depth past which values are compared with ``==`` only.
        """
        self.max_depth = max_depth

    def compare(self, actual: Any, expected: Any) -> list[DiffItem]:
        """Compare ``actual`` against ``expected``.

        Returns:
            List of DiffItem objects, empty when the values are equal.
        """
        items: list[DiffItem] = []
        self._compare_recursive(actual, expected, "", items, depth=0)
        return items

    def _compare_recursive(
        self,
        actual: Any,
        expected: Any,
        path: str,
        items: list[DiffItem],
        depth: int,
    ) -> None:
        location = path or "(root)"

        if actual is expected or _both_nan(actual, expected):
            return

        if depth > self.max_depth:
            if actual != expected:
                items.append(DiffItem(location, DiffType.CHANGED, actual, expected))
            return

        if isinstance(actual, Mapping) and isinstance(expected, Mapping):
            self._compare_mappings(actual, expected, path, items, depth)
            return

        if type(actual) is not type(expected):
            items.append(DiffItem(location, DiffType.TYPE_CHANGED, actual, expected))
            return

        if isinstance(actual, (list, tuple)):
            self._compare_sequences(actual, expected, path, items, depth)
            return

        if actual != expected:
            items.append(DiffItem(location, DiffType.CHANGED, actual, expected))

    def _compare_mappings(
        self,
        actual: Mapping[Any, Any],
        expected: Mapping[Any, Any],
        path: str,
        items: list[DiffItem],
        depth: int,
    ) -> None:
        # expected keys keep their declared order, extra actual keys follow
        keys = list(expected.keys()) + [k for k in actual.keys() if k not in expected]

        for key in keys:
            key_path = f"{path}.{key}" if path else str(key)

            if key not in actual:
                items.append(DiffItem(key_path, DiffType.MISSING, None, expected[key]))
            elif key not in expected:
                items.append(DiffItem(key_path, DiffType.UNEXPECTED, actual[key], None))
            else:
                self._compare_recursive(actual[key], expected[key], key_path, items, depth + 1)

    def _compare_sequences(
        self,
        actual: list[Any] | tuple[Any, ...],
        expected: list[Any] | tuple[Any, ...],
        path: str,
        items: list[DiffItem],
        depth: int,
    ) -> None:
        max_len = max(len(actual), len(expected))
        for i in range(max_len):
            index_path = f"{path}[{i}]"

            if i >= len(actual):
                items.append(DiffItem(index_path, DiffType.MISSING, None, expected[i]))
            elif i >= len(expected):
                items.append(DiffItem(index_path, DiffType.UNEXPECTED, actual[i], None))
            else:
                self._compare_recursive(actual[i], expected[i], index_path, items, depth + 1)


def _both_nan(actual: Any, expected: Any) -> bool:
    return (
        type(actual) is float
        and type(expected) is float
        and math.isnan(actual)
        and math.isnan(expected)
    )


def is_equal(actual: Any, expected: Any) -> bool:
    """Return True when ``actual`` and ``expected`` are structurally equal."""
    return not StructuralDiff().compare(actual, expected)
