"""
Tests for the handler-registry reducer.

Critical: Reducer must be pure (no side effects, deterministic).
"""

import pytest

from statebox.core.action_types import ActionTypes
from statebox.core.actions import Action
from statebox.core.canonical import canonical_json_str
from statebox.core.errors import InvalidTransitionError
from statebox.core.reducer import Reducer
from statebox.store import create_store


def inc_handler(state, action):
    return {"n": state["n"] + action.payload["inc"]}


def mul_handler(state, action):
    return {"n": state["n"] * action.payload["mul"]}


def make_reducer(**kwargs):
    r = Reducer(initial={"n": 0}, **kwargs)
    r.register("INC", inc_handler)
    r.register("MUL", mul_handler)
    return r


def test_reducer_deterministic_output():
    """Same (state, action) must produce same output."""
    r = make_reducer()
    e = Action(type="INC", payload={"inc": 2})

    s1 = r({"n": 1}, e)
    s2 = r({"n": 1}, e)

    assert canonical_json_str(s1) == canonical_json_str(s2)


def test_reducer_immutability():
    """Reducer must not mutate input state."""
    r = make_reducer()
    s0 = {"n": 5}

    s1 = r(s0, Action(type="INC", payload={"inc": 1}))

    assert s0 == {"n": 5}
    assert s1 == {"n": 6}


def test_initial_state_used_when_absent():
    r = make_reducer()
    assert r(None, Action(type="INC", payload={"inc": 3})) == {"n": 3}
    assert r(None, {"type": ActionTypes.INIT}) == {"n": 0}


def test_unknown_type_returns_state():
    r = make_reducer()
    state = {"n": 4}
    assert r(state, {"type": "NOPE"}) is state


def test_strict_reducer_rejects_unknown_type():
    r = make_reducer(strict=True)
    with pytest.raises(InvalidTransitionError, match="NOPE"):
        r({"n": 0}, {"type": "NOPE"})


def test_strict_reducer_accepts_lifecycle_actions():
    r = make_reducer(strict=True)
    store = create_store(r)
    store.replace_reducer(make_reducer(strict=True))
    assert store.get_state() == {"n": 0}


def test_register_and_contains():
    r = Reducer()
    assert "INC" not in r
    r.register("INC", inc_handler)
    assert "INC" in r


def test_reregister_overrides_handler():
    r = make_reducer()
    r.register("INC", lambda state, action: {"n": -1})
    assert r({"n": 0}, Action(type="INC")) == {"n": -1}


def test_reducer_sequence_through_store():
    """Sequence of actions must produce deterministic result."""
    actions = [
        Action(type="INC", payload={"inc": 5}),
        Action(type="MUL", payload={"mul": 2}),
        Action(type="INC", payload={"inc": 3}),
    ]

    results = []
    for _ in range(10):
        store = create_store(make_reducer())
        for a in actions:
            store.dispatch(a)
        results.append(canonical_json_str(store.get_state()))

    assert len(set(results)) == 1
    # (0+5)*2+3 = 13
    assert store.get_state() == {"n": 13}


def test_initial_state_not_shared_between_stores():
    """An in-place handler must not leak into other stores built from the same reducer."""
    r = Reducer(initial={"items": []})

    def add_in_place(state, action):
        state["items"].append(action.payload["item"])
        return state

    r.register("ADD", add_in_place)
    first = create_store(r)
    second = create_store(r)

    first.dispatch(Action(type="ADD", payload={"item": "a"}))

    assert first.get_state() == {"items": ["a"]}
    assert second.get_state() == {"items": []}
    assert r.initial == {"items": []}
