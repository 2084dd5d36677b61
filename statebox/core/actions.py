"""
Action model for store transitions.

Actions are plain records describing an intended state change. The store only
requires a "type" discriminator; everything else belongs to the reducer.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        type: Action type (e.g., "TodoAdded", "INC")
        payload: Action-specific data
        meta: Metadata (source, reason, etc.)
    """
    type: Any
    payload: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "payload": dict(self.payload),
            "meta": dict(self.meta),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Action":
        return Action(
            type=data.get("type"),
            payload=dict(data.get("payload", {})),
            meta=dict(data.get("meta", {})),
        )


def is_plain_record(value: Any) -> bool:
    """
    Check whether value is a plain data record.

    Accepted:
    - exact dict instances (subclasses may carry behaviour)
    - dataclass instances (not the dataclass types themselves)

    Everything else is rejected: callables, awaitables, sequences, sets,
    scalars, None and arbitrary class instances.
    """
    if type(value) is dict:
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def action_type(action: Any) -> Optional[Any]:
    """
    Read the discriminator of a plain record.

    Returns:
        The "type" value, or None if the record has none
    """
    if isinstance(action, dict):
        return action.get("type")
    return getattr(action, "type", None)
