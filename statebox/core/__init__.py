"""
Core primitives shared by the store engine.

- Action: Immutable action record and plain-record predicate
- ActionTypes: Reserved lifecycle action types
- Reducer: Handler registry usable as a reducer function
- Canonical: Deterministic serialization and state hashing
- Errors: Exception hierarchy
"""

from .actions import Action, action_type, is_plain_record
from .action_types import ActionTypes, is_reserved, random_token
from .reducer import Reducer
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, state_hash
from .errors import (
    ActionLogError,
    ConfigurationError,
    InvalidActionError,
    InvalidLifecycleError,
    InvalidStateAccessError,
    InvalidTransitionError,
    ReentrancyError,
    StoreError,
    TypeMismatchError,
)

__all__ = [
    "Action",
    "action_type",
    "is_plain_record",
    "ActionTypes",
    "is_reserved",
    "random_token",
    "Reducer",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "state_hash",
    "ActionLogError",
    "ConfigurationError",
    "InvalidActionError",
    "InvalidLifecycleError",
    "InvalidStateAccessError",
    "InvalidTransitionError",
    "ReentrancyError",
    "StoreError",
    "TypeMismatchError",
]
