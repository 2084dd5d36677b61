"""
Replay system for deterministic state reconstruction.

Replay dispatches a recorded action stream through a store.
Must be 100% deterministic: same actions -> same state.
"""

from .log import read_actions
from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "read_actions",
    "replay",
]
