"""
Statebox

A minimal, predictable state container: one state value, evolved only by
pure reducers, observed through listeners.
"""

__version__ = "0.1.0"

from .core import (
    Action,
    ActionTypes,
    Reducer,
    StoreError,
    is_plain_record,
)
from .store import (
    Store,
    compose,
    create_store,
    new_store,
    new_store_with_enhancer,
    new_store_with_state,
)

__all__ = [
    "__version__",
    "Action",
    "ActionTypes",
    "Reducer",
    "Store",
    "StoreError",
    "compose",
    "create_store",
    "is_plain_record",
    "new_store",
    "new_store_with_enhancer",
    "new_store_with_state",
]
