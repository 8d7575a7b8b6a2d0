"""finite_state_machine: a small, generic finite state machine engine

The machine is in exactly one state at a time. Each state maps to a bundle of
properties, and the machine exposes the properties of the state it is in.

Responsibilities:
    - Tracking the current state
    - Resolving properties for any state, synthesizing them for unknown states
    - Running exit and entry hooks on every transition
    - Following entry redirects until a state accepts
    - Notifying the client once a transition has settled

Interactions:
    - Client code supplies the state table, default factory and callbacks
    - Logging system for diagnostics (DEBUG records only)

Cross-cutting Concerns:
    Thread Safety:
        - Not thread-safe; access must be serialized by the embedder
        - Hooks may re-enter set_state on the same call stack

    Error Handling:
        - Engine errors derive from FsmError
        - Hook failures propagate unchanged, with no rollback
"""

from finite_state_machine.core import (
    FsmError,
    FsmProperties,
    NoCurrentStateError,
    PropertiesProtocol,
    RedirectLimitError,
    StateMachine,
)

__version__ = "0.1.0"

__all__ = [
    "StateMachine",
    "FsmProperties",
    "PropertiesProtocol",
    "FsmError",
    "NoCurrentStateError",
    "RedirectLimitError",
]
