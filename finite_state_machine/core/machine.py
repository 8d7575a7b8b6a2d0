# finite_state_machine/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from types import MappingProxyType
from typing import Callable, Generic, List, Mapping, Optional

from finite_state_machine.core.errors import NoCurrentStateError, RedirectLimitError
from finite_state_machine.core.types import Props, StateId

logger = logging.getLogger(__name__)

_NO_STATE = object()


class StateMachine(Generic[StateId, Props]):
    """
    A finite state machine that is in exactly one state at a time.

    Each state id maps to a properties object. The machine only reads the
    ``on_enter`` and ``on_exit`` hooks from it; every other attribute is
    payload for the client. Ids missing from the table are resolved through
    ``default_properties`` on every lookup.

    Entering a state may be redirected: if the target's ``on_enter`` returns
    another state id, the machine tries that id instead, and so on until a
    state accepts. Only the accepted state is ever committed, and
    ``on_entered_state`` fires once with it.

    The machine is synchronous and takes no locks. Hooks may call
    ``set_state`` on the same machine; the nested call completes before the
    outer one resumes.
    """

    def __init__(
        self,
        machine: Mapping[StateId, Props],
        initial_state: StateId,
        default_properties: Callable[[StateId], Props],
        on_entered_state: Optional[Callable[[StateId, Props], None]] = None,
        *,
        max_redirects: Optional[int] = None,
    ) -> None:
        """
        :param machine: Maps state ids to their properties. Copied; never mutated.
        :param initial_state: The state entered on construction.
        :param default_properties: Builds properties for ids absent from ``machine``.
        :param on_entered_state: Called with the final state and its properties
            after every completed transition.
        :param max_redirects: Maximum redirect hops per transition, or None for
            no limit.
        """
        if max_redirects is not None and max_redirects < 0:
            raise ValueError("max_redirects must be None or a non-negative integer")

        self._machine = dict(machine)
        self._default_properties = default_properties
        self._on_entered_state = on_entered_state
        self._max_redirects = max_redirects
        self._current_state = _NO_STATE

        self.set_state(initial_state)

    @property
    def table(self) -> Mapping[StateId, Props]:
        """Read-only view of the state table."""
        return MappingProxyType(self._machine)

    @property
    def max_redirects(self) -> Optional[int]:
        return self._max_redirects

    @property
    def current_state(self) -> StateId:
        """The state the machine is currently in."""
        if self._current_state is _NO_STATE:
            raise NoCurrentStateError("State machine has not entered a state yet")
        return self._current_state

    @property
    def values(self) -> Props:
        """The properties of the current state."""
        return self.get(self.current_state)

    def get(self, state: StateId) -> Props:
        """
        Return the properties for ``state``, building them with the default
        factory if the table has no entry. Results are never cached.
        """
        if state in self._machine:
            return self._machine[state]
        return self._default_properties(state)

    def __getitem__(self, state: StateId) -> Props:
        return self.get(state)

    def set_state(self, next_state: StateId) -> None:
        """
        Transition to ``next_state``, following any redirects.

        Exits the current state (if any), resolves the entry chain, commits the
        accepted state and then notifies ``on_entered_state``. Exceptions from
        hooks propagate; nothing is rolled back.

        :param next_state: The requested state.
        :raises RedirectLimitError: If ``max_redirects`` is set and exceeded.
        """
        if self._current_state is not _NO_STATE:
            self._notify_exit(self._current_state)

        accepted = self._resolve(next_state)

        self._current_state = accepted
        logger.debug("Entered state %r", accepted)

        if self._on_entered_state is not None:
            self._on_entered_state(accepted, self.get(accepted))

    def _resolve(self, candidate: StateId) -> StateId:
        """Follow entry redirects from ``candidate`` until a state accepts."""
        chain: List[StateId] = [candidate]
        while True:
            redirect = self._notify_enter(candidate)
            if redirect is None or redirect == candidate:
                return candidate

            if self._max_redirects is not None and len(chain) > self._max_redirects:
                raise RedirectLimitError(
                    f"Exceeded {self._max_redirects} redirects entering {chain[0]!r}",
                    {"target": chain[0], "chain": chain + [redirect], "limit": self._max_redirects},
                )

            logger.debug("State %r redirected to %r", candidate, redirect)
            chain.append(redirect)
            candidate = redirect

    def _notify_exit(self, state: StateId) -> None:
        """Invoke the exit hook of ``state``, if it has one."""
        on_exit = getattr(self.get(state), "on_exit", None)
        if on_exit is not None:
            on_exit()

    def _notify_enter(self, state: StateId) -> Optional[StateId]:
        """Invoke the entry hook of ``state`` and return its redirect, if any."""
        on_enter = getattr(self.get(state), "on_enter", None)
        if on_enter is None:
            return None
        return on_enter()
