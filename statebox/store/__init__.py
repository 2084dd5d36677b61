"""
Store engine.

This module provides:
- Store: State owner with dispatch, subscribe, get_state, replace_reducer
- create_store: Factory resolving (reducer, preloaded_state, enhancer)
- new_store*: Unambiguous named factories
- compose: Enhancer composition
- StateObservable: Reactive interop adapter
"""

from .listeners import ListenerRegistry
from .enhancers import Enhancer, StoreFactory, compose
from .observable import StateObservable, Subscription, SupportsObservable, observable_from
from .store import (
    Store,
    create_store,
    new_store,
    new_store_with_enhancer,
    new_store_with_state,
)

__all__ = [
    "ListenerRegistry",
    "Enhancer",
    "StoreFactory",
    "compose",
    "StateObservable",
    "Subscription",
    "SupportsObservable",
    "observable_from",
    "Store",
    "create_store",
    "new_store",
    "new_store_with_enhancer",
    "new_store_with_state",
]
