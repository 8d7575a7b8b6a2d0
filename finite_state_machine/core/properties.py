# finite_state_machine/core/properties.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from finite_state_machine.core.types import EnterHook, ExitHook


@runtime_checkable
class PropertiesProtocol(Protocol):
    """
    Minimal capability surface the engine needs from a state's properties.

    Attributes:
        on_enter: Called when the machine is about to enter the state. Returns
            None to accept the state, or another state id to redirect.
        on_exit: Called when the machine is about to leave the state.

    Runtime Invariants:
    - The engine only reads these two attributes; everything else on the
      object is client payload.
    - Either attribute may be None (or missing) to mean "no hook".
    """

    on_enter: Optional[EnterHook]
    on_exit: Optional[ExitHook]


@dataclass
class FsmProperties:
    """
    Base class for state properties. Subclass it (as a dataclass) to add
    payload fields; the hooks are keyword-only so subclasses may declare
    required fields.
    """

    on_enter: Optional[EnterHook] = field(default=None, kw_only=True)
    on_exit: Optional[ExitHook] = field(default=None, kw_only=True)
