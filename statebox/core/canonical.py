"""
Canonical serialization for deterministic state hashing.

Two stores fed the same actions must end in byte-identical state; these
functions define what "identical" means.
"""

import dataclasses
import hashlib
import json
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested dict/list/dataclass to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples converted to lists
    - dataclass instances converted to dicts
    - recursive normalization
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Returns:
        UTF-8 encoded JSON bytes
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Deterministic JSON string (for display or storage)."""
    return canonical_json_bytes(obj).decode("utf-8")


def state_hash(state: Any) -> str:
    """
    Compute SHA-256 hash of a state tree.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_bytes(state)).hexdigest()
