"""
Reactive interop for store state.

A store exposes its state as a minimal observable: subscribe(observer) pushes
the current state to observer.next immediately and after every dispatch.
Objects advertise the capability through a named to_observable() method, so
reactive libraries can consume them without sharing a base class.
"""

import types
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from ..core.errors import TypeMismatchError

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)
_FUNCTIONS = (types.FunctionType, types.BuiltinFunctionType, types.MethodType)


@runtime_checkable
class SupportsObservable(Protocol):
    """Anything that can hand out an observable of its values."""

    def to_observable(self) -> Any:
        ...


def observable_from(obj: Any) -> Any:
    """
    Resolve the observable of an object supporting the interop method.

    Raises:
        TypeMismatchError: If obj does not implement to_observable()
    """
    if not isinstance(obj, SupportsObservable):
        raise TypeMismatchError(f"Expected an observable source, got {type(obj).__name__}.")
    return obj.to_observable()


def _next_callback(observer: Any) -> Optional[Callable[[Any], Any]]:
    if isinstance(observer, dict):
        return observer.get("next")
    callback = getattr(observer, "next", None)
    if callback is None:
        # ReactiveX observers name it on_next
        callback = getattr(observer, "on_next", None)
    return callback


class Subscription:
    """Handle returned by StateObservable.subscribe()."""

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe = unsubscribe

    def unsubscribe(self) -> None:
        self._unsubscribe()


class StateObservable:
    """
    Minimal observable over a store's state.

    Built entirely from the store's public subscribe() and get_state().
    """

    def __init__(self, store: Any) -> None:
        self._store = store

    def subscribe(self, observer: Any) -> Subscription:
        """
        Observe state changes.

        Args:
            observer: Object with a next(state) method, or a mapping with a
                "next" callable

        Returns:
            Subscription whose unsubscribe() stops further emissions

        Raises:
            TypeMismatchError: If observer is None, a scalar, a bare function,
                or any other callable (class, partial) without next/on_next
        """
        if observer is None or isinstance(observer, _SCALARS + _FUNCTIONS):
            raise TypeMismatchError("Expected the observer to be an object.")
        if callable(observer) and _next_callback(observer) is None:
            raise TypeMismatchError("Expected the observer to be an object.")

        store = self._store

        def observe_state() -> None:
            callback = _next_callback(observer)
            if callback:
                callback(store.get_state())

        observe_state()
        return Subscription(store.subscribe(observe_state))

    def to_observable(self) -> "StateObservable":
        return self
