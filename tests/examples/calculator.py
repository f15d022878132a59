"""A pocket calculator reducer.

The display is a string, as a real calculator shows it. Operators are
applied left to right when the next operator or ``=`` is pressed.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from givenwhen import Dispatch, with_reducer

OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

INITIAL_STATE: dict[str, Any] = {
    "display": "0",
    "accumulator": None,
    "operator": None,
    "overwrite": True,
}


def _format(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return repr(value)


def _evaluate(state: dict[str, Any]) -> str:
    try:
        result = OPERATORS[state["operator"]](state["accumulator"], float(state["display"]))
    except ZeroDivisionError:
        return "Error"
    return _format(result)


def calculator(state: dict[str, Any] | None = None, action: dict[str, Any] | None = None) -> dict[str, Any]:
    if state is None:
        state = INITIAL_STATE
    action = action or {}
    action_type = action.get("type")

    if action_type == "KEY_DIGIT":
        digit = str(action["digit"])
        if state["overwrite"] or state["display"] == "0":
            display = digit
        else:
            display = state["display"] + digit
        return {**state, "display": display, "overwrite": False}

    if action_type == "KEY_POINT":
        if state["overwrite"]:
            return {**state, "display": "0.", "overwrite": False}
        if "." in state["display"]:
            return state
        return {**state, "display": state["display"] + "."}

    if action_type == "KEY_OPERATOR":
        pending = state["operator"] is not None and state["accumulator"] is not None
        if pending and not state["overwrite"]:
            display = _evaluate(state)
        else:
            display = state["display"]
        accumulator = None if display == "Error" else float(display)
        return {
            **state,
            "display": display,
            "accumulator": accumulator,
            "operator": action["operator"],
            "overwrite": True,
        }

    if action_type == "KEY_EQUALS":
        if state["operator"] is None or state["accumulator"] is None:
            return {**state, "overwrite": True}
        return {
            **state,
            "display": _evaluate(state),
            "accumulator": None,
            "operator": None,
            "overwrite": True,
        }

    if action_type == "KEY_CLEAR":
        return INITIAL_STATE

    return state


calculator_harness = with_reducer(calculator)
initial = calculator_harness.initial_state


def key_digit(digit: int) -> Dispatch:
    return calculator_harness.dispatch({"type": "KEY_DIGIT", "digit": digit})


def key_operator(symbol: str) -> Dispatch:
    return calculator_harness.dispatch({"type": "KEY_OPERATOR", "operator": symbol})


key_point = calculator_harness.dispatch({"type": "KEY_POINT"})
key_equals = calculator_harness.dispatch({"type": "KEY_EQUALS"})
key_clear = calculator_harness.dispatch({"type": "KEY_CLEAR"})


def text_to_display(state: dict[str, Any]) -> str:
    return state["display"]
