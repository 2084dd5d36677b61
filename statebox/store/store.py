"""
Store: the single owner of a state tree.

State changes only through dispatch(), which runs the reducer exactly once and
then notifies every subscribed listener. The reducer call is guarded: while it
runs, the store refuses nested dispatches, state reads and subscription
changes.
"""

import logging
from typing import Any, Callable

from ..core.action_types import ActionTypes
from ..core.actions import action_type, is_plain_record
from ..core.errors import (
    ConfigurationError,
    InvalidActionError,
    InvalidLifecycleError,
    InvalidStateAccessError,
    ReentrancyError,
    TypeMismatchError,
)
from .enhancers import Enhancer
from .listeners import Listener, ListenerRegistry
from .observable import StateObservable

logger = logging.getLogger(__name__)

ReducerFn = Callable[[Any, Any], Any]

_SEVERAL_ENHANCERS = (
    "It looks like you are passing several store enhancers to create_store(). "
    "This is not supported. Instead, compose them together to a single function."
)


class Store:
    """
    Holds the state tree and the listeners observing it.

    Usage:
        store = create_store(counter)
        unsubscribe = store.subscribe(lambda: print(store.get_state()))
        store.dispatch({"type": "INC"})

    Prefer create_store() or the new_store*() helpers over calling the class
    directly; they apply enhancers.
    """

    def __init__(self, reducer: ReducerFn, preloaded_state: Any = None) -> None:
        if not callable(reducer):
            raise TypeMismatchError("Expected the reducer to be a function.")

        self._reducer = reducer
        self._state = preloaded_state
        self._listeners = ListenerRegistry()
        self._dispatching = False

        # Every reducer returns its initial state for an unknown action,
        # which populates the state tree.
        self.dispatch({"type": ActionTypes.INIT})
        logger.debug("Store created with reducer %r", reducer)

    @property
    def is_dispatching(self) -> bool:
        """True only while the reducer is executing."""
        return self._dispatching

    def get_state(self) -> Any:
        """
        Read the state tree managed by the store.

        Raises:
            InvalidStateAccessError: If called while the reducer is executing
        """
        if self._dispatching:
            raise InvalidStateAccessError(
                "You may not call store.get_state() while the reducer is executing. "
                "The reducer has already received the state as an argument. "
                "Pass it down from the top reducer instead of reading it from the store."
            )
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Add a change listener, called after every dispatch.

        Subscriptions are snapshotted when a dispatch starts notifying:
        subscribing or unsubscribing from inside a listener only affects the
        next dispatch, nested or not. Every listener registered before a
        dispatch began is called by the time it returns, with the latest state.

        Args:
            listener: Zero-argument callback

        Returns:
            unsubscribe() function; calling it twice is a no-op

        Raises:
            TypeMismatchError: If listener is not callable
            InvalidLifecycleError: If called while the reducer is executing
        """
        if not callable(listener):
            raise TypeMismatchError("Expected the listener to be a function.")

        if self._dispatching:
            raise InvalidLifecycleError(
                "You may not call store.subscribe() while the reducer is executing. "
                "If you would like to be notified after the store has been updated, "
                "subscribe and call store.get_state() in the callback."
            )

        is_subscribed = True
        self._listeners.add(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed
            if not is_subscribed:
                return

            if self._dispatching:
                raise InvalidLifecycleError(
                    "You may not unsubscribe from a store listener while the reducer is executing."
                )

            is_subscribed = False
            self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Any) -> Any:
        """
        Dispatch an action. It is the only way to trigger a state change.

        Args:
            action: Plain record (dict or dataclass instance) with a "type"

        Returns:
            The same action, for pass-through composition

        Raises:
            InvalidActionError: If action is not a plain record or has no type
            ReentrancyError: If called from inside the reducer
        """
        if not is_plain_record(action):
            raise InvalidActionError(
                "Actions must be plain objects. Use custom middleware for async actions."
            )

        kind = action_type(action)
        if kind is None:
            raise InvalidActionError(
                'Actions may not have an undefined "type" property. Have you misspelled a constant?'
            )

        if self._dispatching:
            raise ReentrancyError("Reducers may not dispatch actions.")

        logger.debug("Dispatching %s", kind)
        try:
            self._dispatching = True
            self._state = self._reducer(self._state, action)
        finally:
            self._dispatching = False

        # The snapshot list is never mutated, so iterating it is safe even
        # when listeners subscribe, unsubscribe or dispatch.
        for listener in self._listeners.snapshot():
            listener()

        return action

    def replace_reducer(self, next_reducer: ReducerFn) -> None:
        """
        Replace the reducer used to calculate state.

        A REPLACE action is dispatched right away so the new reducer can
        initialize any state it introduces.

        Raises:
            TypeMismatchError: If next_reducer is not callable
        """
        if not callable(next_reducer):
            raise TypeMismatchError("Expected the next_reducer to be a function.")

        self._reducer = next_reducer
        logger.debug("Reducer replaced with %r", next_reducer)
        self.dispatch({"type": ActionTypes.REPLACE})

    def observable(self) -> StateObservable:
        """Interop point for observable/reactive libraries."""
        return StateObservable(self)

    to_observable = observable

    def __repr__(self) -> str:
        return f"<Store reducer={self._reducer!r} listeners={len(self._listeners)}>"


def create_store(reducer: ReducerFn, preloaded_state: Any = None, enhancer: Any = None, *extra: Any) -> Any:
    """
    Create a store holding the state tree.

    Args:
        reducer: Pure function (state, action) -> next state
        preloaded_state: Initial state; when it is callable and no enhancer is
            given, it is taken as the enhancer
        enhancer: Store enhancer, (factory) -> factory

    Returns:
        Store, or whatever the enhancer's factory returns

    Raises:
        ConfigurationError: If more than one enhancer is passed positionally
        TypeMismatchError: If enhancer or reducer is not callable
    """
    if (callable(preloaded_state) and callable(enhancer)) or (
        callable(enhancer) and extra and callable(extra[0])
    ):
        raise ConfigurationError(_SEVERAL_ENHANCERS)

    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = None

    if enhancer is not None:
        if not callable(enhancer):
            raise TypeMismatchError("Expected the enhancer to be a function.")
        return enhancer(create_store)(reducer, preloaded_state)

    return Store(reducer, preloaded_state)


def new_store(reducer: ReducerFn) -> Store:
    """Create a store with no preloaded state and no enhancer."""
    return Store(reducer)


def new_store_with_state(reducer: ReducerFn, state: Any) -> Store:
    """
    Create a store from preloaded state.

    Unlike create_store(), a callable state is kept as state.
    """
    return Store(reducer, state)


def new_store_with_enhancer(reducer: ReducerFn, enhancer: Enhancer, preloaded_state: Any = None) -> Any:
    """
    Create a store through a single enhancer.

    Raises:
        ConfigurationError: If a sequence of enhancers is passed
        TypeMismatchError: If enhancer is not callable
    """
    if isinstance(enhancer, (list, tuple)):
        raise ConfigurationError(_SEVERAL_ENHANCERS)
    if not callable(enhancer):
        raise TypeMismatchError("Expected the enhancer to be a function.")
    return enhancer(create_store)(reducer, preloaded_state)
