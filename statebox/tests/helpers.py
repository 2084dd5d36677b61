"""
Reducers shared by the store tests.
"""

from statebox.core.actions import action_type


def counter(state, action):
    state = 0 if state is None else state
    if action_type(action) == "INC":
        return state + 1
    if action_type(action) == "DEC":
        return state - 1
    return state


def concat(state, action):
    state = "" if state is None else state
    if action_type(action) == "APPEND":
        return f"{state}{action['text']}"
    return state


class Recorder:
    """Reducer wrapper that remembers every (state, action) it saw."""

    def __init__(self, reducer=counter):
        self.reducer = reducer
        self.calls = []

    def __call__(self, state, action):
        self.calls.append((state, action))
        return self.reducer(state, action)

    @property
    def types(self):
        return [action_type(a) for _, a in self.calls]
