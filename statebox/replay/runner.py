"""
Replay runner: reconstruct state from a sequence of actions.

Replay dispatches each action through a fresh store. Reducers are pure, so the
same actions always produce the same state hash.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional

from ..core.actions import action_type
from ..core.canonical import state_hash
from ..store.store import new_store_with_state


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions dispatched
        state_hash: SHA-256 of the canonical final state
        counts: Dispatch count per action type
    """
    state: Any
    applied: int
    state_hash: str
    counts: Dict[str, int] = field(default_factory=dict)


def replay(
    actions: Iterable[Any],
    reducer: Callable[[Any, Any], Any],
    preloaded_state: Any = None,
    until: Optional[int] = None,
) -> ReplayResult:
    """
    Replay actions to reconstruct state.

    Args:
        actions: Plain-record actions in dispatch order
        reducer: Reducer function
        preloaded_state: Initial state (None = reducer default)
        until: Stop after this many actions (None = all)

    Returns:
        ReplayResult with final state, count and hash
    """
    store = new_store_with_state(reducer, preloaded_state)
    count = 0
    counts: Dict[str, int] = {}

    for action in actions:
        if until is not None and count >= until:
            break
        store.dispatch(action)
        kind = str(action_type(action))
        counts[kind] = counts.get(kind, 0) + 1
        count += 1

    state = store.get_state()
    return ReplayResult(state=state, applied=count, state_hash=state_hash(state), counts=counts)
