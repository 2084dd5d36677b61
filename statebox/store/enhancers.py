"""
Enhancer composition.

An enhancer takes a store factory and returns a replacement factory with the
same (reducer, preloaded_state) signature. create_store accepts exactly one;
several enhancers are chained with compose() first.
"""

from functools import reduce
from typing import Any, Callable

StoreFactory = Callable[..., Any]
Enhancer = Callable[[StoreFactory], StoreFactory]


def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Compose single-argument functions from right to left.

    compose(f, g, h)(x) == f(g(h(x)))

    With no functions the identity is returned; with one, that function.
    """
    if not funcs:
        return lambda arg: arg
    if len(funcs) == 1:
        return funcs[0]
    return reduce(lambda f, g: lambda arg: f(g(arg)), funcs)
