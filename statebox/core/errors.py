"""
Exception types for the store engine.
"""

from typing import Optional


class StoreError(Exception):
    """Base class for every store failure."""
    pass


class ConfigurationError(StoreError):
    """Raised when store construction arguments cannot be reconciled."""
    pass


class TypeMismatchError(StoreError, TypeError):
    """Raised when a reducer, enhancer, listener or observer has the wrong shape."""
    pass


class InvalidStateAccessError(StoreError):
    """Raised when state is read while the reducer is executing."""
    pass


class InvalidLifecycleError(StoreError):
    """Raised when subscriptions change while the reducer is executing."""
    pass


class InvalidActionError(StoreError):
    """Raised when a dispatched action is not a plain record with a type."""
    pass


class ReentrancyError(StoreError):
    """Raised when a reducer dispatches an action."""
    pass


class InvalidTransitionError(StoreError):
    """Raised when a strict reducer has no handler for an action type."""
    pass


class ActionLogError(StoreError):
    """Raised when an action log line cannot be decoded."""

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None) -> None:
        self.path = path
        self.line = line
        if path is not None and line is not None:
            message = f"{path}:{line}: {message}"
        super().__init__(message)
