"""Tests for the reducer adapter."""

from __future__ import annotations

from typing import Any

import pytest

from givenwhen import INIT_ACTION, Dispatch, Given, ReducerHarness, given, should_equal, with_reducer


class TestWithReducer:
    def test_initial_state_comes_from_init_action(self) -> None:
        calls: list[tuple[Any, Any]] = []

        def reducer(state, action):
            calls.append((state, action))
            return {"ready": True}

        harness = with_reducer(reducer)

        assert isinstance(harness, ReducerHarness)
        assert harness.initial_state == {"ready": True}
        assert calls == [(None, INIT_ACTION)]

    def test_reducer_is_called_once_on_wrap(self) -> None:
        calls = []
        with_reducer(lambda state, action: calls.append(action) or 0)
        assert len(calls) == 1

    def test_dispatch_builds_transformer(self) -> None:
        harness = with_reducer(lambda state, action: (state, action))
        transformer = harness.dispatch("PING")

        assert isinstance(transformer, Dispatch)
        assert transformer("s") == ("s", "PING")

    def test_dispatch_is_lazy(self) -> None:
        calls = []

        def reducer(state, action):
            calls.append(action)
            return state

        harness = with_reducer(reducer)
        harness.dispatch({"type": "NOOP"})
        assert calls == [INIT_ACTION]

    def test_dispatch_description_uses_action_type(self) -> None:
        harness = with_reducer(lambda state, action: state)
        assert harness.dispatch({"type": "ADD", "value": 1}).description == "dispatch(ADD)"
        assert harness.dispatch(42).description == "dispatch(42)"

    def test_dispatch_steps_are_recorded(self) -> None:
        harness = with_reducer(lambda state, action: state)
        node = given(0).when(harness.dispatch({"type": "TICK"}))
        assert node.steps == ("dispatch(TICK)",)

    def test_reducer_errors_propagate(self) -> None:
        def strict(state, action):
            if action["type"] not in ("@@givenwhen/INIT", "OK"):
                raise ValueError(f"unknown action {action['type']}")
            return state or 0

        harness = with_reducer(strict)
        with pytest.raises(ValueError, match="unknown action BAD"):
            given(harness.initial_state).when(harness.dispatch({"type": "BAD"}))

    def test_given_starts_from_initial_state(self) -> None:
        harness = with_reducer(lambda state, action: [] if state is None else state)
        node = harness.given(name="empty")
        assert isinstance(node, Given)
        assert node.state == []
        assert node.name == "empty"
        node.then(should_equal([]))
