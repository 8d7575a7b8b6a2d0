# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

import pytest

from finite_state_machine import FsmProperties, StateMachine


class TestState(Enum):
    __test__ = False

    ONE = auto()
    TWO = auto()
    THREE = auto()


class ResultState(Enum):
    O = auto()
    I = auto()
    II = auto()
    III = auto()


@dataclass
class StateProperties(FsmProperties):
    """Properties carrying a single payload field."""

    result_state: ResultState


class CallRecorder:
    """Records hook invocations in order, as ``(kind, name)`` tuples."""

    def __init__(self):
        self.calls: List[tuple] = []

    def enter(self, name: str, redirect: Optional[TestState] = None):
        def _on_enter():
            self.calls.append(("enter", name))
            return redirect

        return _on_enter

    def exit(self, name: str):
        def _on_exit():
            self.calls.append(("exit", name))

        return _on_exit


@pytest.fixture
def default_properties():
    """A default factory producing a fresh fallback bundle per call."""
    return lambda state: StateProperties(result_state=ResultState.O)


@pytest.fixture
def simple_table():
    """Three states with no hooks."""
    return {
        TestState.ONE: StateProperties(result_state=ResultState.I),
        TestState.TWO: StateProperties(result_state=ResultState.II),
        TestState.THREE: StateProperties(result_state=ResultState.III),
    }


@pytest.fixture
def recorder():
    return CallRecorder()


@pytest.fixture
def machine_factory(default_properties):
    """Returns a factory building a machine over TestState with the given table."""

    def _factory(table, initial_state=TestState.ONE, on_entered_state=None, **kwargs):
        return StateMachine(
            table,
            initial_state,
            default_properties,
            on_entered_state,
            **kwargs,
        )

    return _factory
