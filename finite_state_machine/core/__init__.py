"""
Core package providing the finite state machine engine.

Architecture:
- StateMachine owns the current state and runs the transition algorithm
- Properties objects carry the optional on_enter/on_exit hooks plus client payload
- Errors raised by the engine derive from FsmError; hook failures pass through untouched
"""

from .errors import FsmError, NoCurrentStateError, RedirectLimitError
from .machine import StateMachine
from .properties import FsmProperties, PropertiesProtocol

__all__ = [
    "StateMachine",
    # Properties
    "FsmProperties",
    "PropertiesProtocol",
    # Errors
    "FsmError",
    "NoCurrentStateError",
    "RedirectLimitError",
]
