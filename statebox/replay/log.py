"""
Action log reading.

An action log is JSON Lines: one action object per line, blank lines ignored.
"""

import json
from typing import Any, Dict, Iterator

from ..core.errors import ActionLogError


def read_actions(path: str) -> Iterator[Dict[str, Any]]:
    """
    Read actions from a JSONL log.

    Args:
        path: Path to JSONL file

    Yields:
        Action dicts in file order

    Raises:
        FileNotFoundError: If path does not exist
        ActionLogError: If a line is not a JSON object
    """
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                rec = json.loads(line)
            except ValueError as e:
                raise ActionLogError(f"invalid JSON: {e}", path=path, line=lineno) from e
            if not isinstance(rec, dict):
                raise ActionLogError("action must be a JSON object", path=path, line=lineno)
            yield rec
