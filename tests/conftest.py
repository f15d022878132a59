"""Pytest fixtures for givenwhen tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import Any

import pytest

from givenwhen.config import reset_config
from givenwhen.observability.logging import ROOT_LOGGER_NAME


class Recorder:
    """Callable recording every value it is called with."""

    def __init__(self, result: Any = None) -> None:
        self.calls: list[Any] = []
        self.result = result

    def __call__(self, value: Any) -> Any:
        self.calls.append(value)
        return self.result


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against default settings and a pristine logger tree."""
    for name in list(os.environ):
        if name.startswith("GIVENWHEN_"):
            monkeypatch.delenv(name)
    reset_config()

    yield

    reset_config()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.propagate = True
    root_logger.setLevel(logging.NOTSET)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def increment() -> Any:
    def increment(n: int) -> int:
        return n + 1

    return increment


@pytest.fixture
def double() -> Any:
    def double(n: int) -> int:
        return n * 2

    return double
