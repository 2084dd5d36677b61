"""
Tests for enhancer composition.
"""

from statebox.core.actions import action_type
from statebox.store import compose, create_store
from statebox.tests.helpers import counter


def tagging_enhancer(tag, seen):
    """Enhancer wrapping dispatch to record which layer saw each action."""

    def enhancer(factory):
        def create(reducer, preloaded_state=None):
            store = factory(reducer, preloaded_state)
            inner = store.dispatch

            def dispatch(action):
                seen.append((tag, action_type(action)))
                return inner(action)

            store.dispatch = dispatch
            return store

        return create

    return enhancer


def test_compose_without_functions_is_identity():
    assert compose()(42) == 42


def test_compose_single_function_is_returned():
    def f(x):
        return x

    assert compose(f) is f


def test_compose_applies_right_to_left():
    def f(x):
        return f"f({x})"

    def g(x):
        return f"g({x})"

    def h(x):
        return f"h({x})"

    assert compose(f, g, h)("x") == "f(g(h(x)))"


def test_single_enhancer_wraps_dispatch():
    seen = []
    store = create_store(counter, tagging_enhancer("log", seen))

    store.dispatch({"type": "INC"})

    assert seen == [("log", "INC")]
    assert store.get_state() == 1


def test_composed_enhancers_stack_outermost_first():
    seen = []
    enhancer = compose(tagging_enhancer("outer", seen), tagging_enhancer("inner", seen))
    store = create_store(counter, 10, enhancer)

    returned = store.dispatch({"type": "INC"})

    assert returned == {"type": "INC"}
    assert seen == [("outer", "INC"), ("inner", "INC")]
    assert store.get_state() == 11


def test_replace_reducer_goes_through_enhanced_dispatch():
    seen = []
    store = create_store(counter, tagging_enhancer("log", seen))

    store.replace_reducer(counter)

    assert len(seen) == 1
    assert seen[0][1].startswith("@@statebox/REPLACE")
