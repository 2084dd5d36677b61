"""
Reserved action types for store lifecycle events.

The tokens embed a random component so they never match a literal chosen by
application code. They are generated once per process at import time.
"""

import random
import string

PREFIX = "@@statebox/"

_ALPHABET = string.digits + string.ascii_lowercase


def random_token(length: int = 6) -> str:
    """
    Build a dotted base-36 token, e.g. "k.3.x.9.a.q".
    """
    return ".".join(random.choice(_ALPHABET) for _ in range(length))


class ActionTypes:
    """
    Reserved action types dispatched by the store itself.

    INIT: dispatched once when a store is created
    REPLACE: dispatched after the reducer is replaced
    """
    INIT = f"{PREFIX}INIT{random_token()}"
    REPLACE = f"{PREFIX}REPLACE{random_token()}"


def is_reserved(action_type) -> bool:
    """True for any action type in the store's reserved namespace."""
    return isinstance(action_type, str) and action_type.startswith(PREFIX)
