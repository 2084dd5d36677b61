"""
Tests for action log reading and replay determinism.

Critical: Replay must produce identical state across multiple runs.
"""

import json

import pytest

from statebox.core.errors import ActionLogError, InvalidActionError
from statebox.replay import read_actions, replay
from statebox.tests.helpers import counter


def write_log(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_read_actions_skips_blank_lines(tmp_path):
    log = write_log(tmp_path / "actions.jsonl", ['{"type": "INC"}', "", '{"type": "DEC"}'])
    assert list(read_actions(log)) == [{"type": "INC"}, {"type": "DEC"}]


def test_read_actions_reports_bad_line(tmp_path):
    log = write_log(tmp_path / "actions.jsonl", ['{"type": "INC"}', "{nope"])

    with pytest.raises(ActionLogError) as exc:
        list(read_actions(log))

    assert exc.value.line == 2
    assert exc.value.path == log


def test_read_actions_requires_objects(tmp_path):
    log = write_log(tmp_path / "actions.jsonl", ['["INC"]'])
    with pytest.raises(ActionLogError, match="JSON object"):
        list(read_actions(log))


def test_read_actions_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_actions(str(tmp_path / "missing.jsonl")))


def test_replay_determinism_100_runs(tmp_path):
    """Replay same actions 100 times must produce identical state hash."""
    lines = [json.dumps({"type": "INC" if i % 3 else "DEC"}) for i in range(10)]
    log = write_log(tmp_path / "actions.jsonl", lines)

    hashes = {replay(read_actions(log), counter).state_hash for _ in range(100)}
    assert len(hashes) == 1

    result = replay(read_actions(log), counter)
    # 4 DEC (i = 0, 3, 6, 9), 6 INC
    assert result.state == 2
    assert result.applied == 10
    assert result.counts == {"INC": 6, "DEC": 4}


def test_replay_until():
    actions = [{"type": "INC"}] * 5
    result = replay(actions, counter, until=3)

    assert result.applied == 3
    assert result.state == 3


def test_replay_preloaded_state():
    result = replay([{"type": "INC"}], counter, preloaded_state=41)
    assert result.state == 42


def test_replay_rejects_invalid_actions():
    with pytest.raises(InvalidActionError):
        replay([{"payload": 1}], counter)
