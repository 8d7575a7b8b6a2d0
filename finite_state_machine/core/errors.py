# finite_state_machine/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Dict, Optional


class FsmError(Exception):
    """
    Base exception class for errors raised by the state machine engine itself.

    Failures raised by client hooks are never wrapped in this type; they
    propagate out of ``set_state`` unchanged.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NoCurrentStateError(FsmError):
    """
    Raised when the current state is read before the machine has committed
    its first state.
    """


class RedirectLimitError(FsmError):
    """
    Raised when entry resolution follows more redirects than the machine's
    ``max_redirects`` allows. The machine's current state is left unchanged.
    """

    @property
    def target(self) -> Any:
        return self.details.get("target")

    @property
    def chain(self) -> list:
        return self.details.get("chain", [])

    @property
    def limit(self) -> Optional[int]:
        return self.details.get("limit")
