"""
Reducer: handler registry for pure state transitions.

A Reducer instance is itself a reducer function: calling it with
(state, action) looks up the handler for the action type and returns the next
state. Handlers must be:
- Pure (no side effects, no I/O)
- Deterministic (same input -> same output)
"""

import copy
from typing import Any, Callable, Dict

from .action_types import is_reserved
from .actions import action_type
from .errors import InvalidTransitionError

# Handler signature: (current_state, action) -> new_state
Handler = Callable[[Any, Any], Any]


class Reducer:
    """
    Registry of action handlers usable directly as a store reducer.

    Usage:
        reducer = Reducer(initial={"n": 0})
        reducer.register("INC", handle_inc)
        store = create_store(reducer)

    Unknown action types return the state unchanged (the default case), which
    is how the store's INIT and REPLACE actions populate the initial state.
    With strict=True, unknown application types raise instead.
    """

    def __init__(self, initial: Any = None, strict: bool = False) -> None:
        self.initial = initial
        self.strict = strict
        self._handlers: Dict[Any, Handler] = {}

    def register(self, action_type: Any, handler: Handler) -> None:
        """
        Register action handler.

        Args:
            action_type: Action type value
            handler: Pure function (current_state, action) -> new_state
        """
        self._handlers[action_type] = handler

    def __contains__(self, action_type: Any) -> bool:
        return action_type in self._handlers

    def __call__(self, state: Any, action: Any) -> Any:
        """
        Apply action to state using the registered handler.

        Raises:
            InvalidTransitionError: If strict and no handler is registered
        """
        if state is None:
            # Each store gets its own copy of the initial state
            state = copy.deepcopy(self.initial)

        kind = action_type(action)
        handler = self._handlers.get(kind)
        if handler is None:
            if self.strict and not is_reserved(kind):
                raise InvalidTransitionError(f"No handler for action type: {kind}")
            return state
        return handler(state, action)
