# finite_state_machine/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Hashable, Optional, TypeVar

StateId = TypeVar("StateId", bound=Hashable)
Props = TypeVar("Props")

# Callback Types
EnterHook = Callable[[], Optional[Any]]
ExitHook = Callable[[], None]
