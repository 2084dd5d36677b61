"""
Copy-on-write listener registry.

Two lists are kept: the one the last dispatch notified (current) and the one
subscribe/unsubscribe edit (next). They share a single list object until the
first mutation after a snapshot, at which point next is cloned. A dispatch
that holds a snapshot therefore never sees membership change under it.
"""

from typing import Callable, List

Listener = Callable[[], None]


class ListenerRegistry:
    """
    Ordered listener list with stable notification snapshots.

    Usage:
        registry = ListenerRegistry()
        registry.add(listener)
        for listener in registry.snapshot():
            listener()
    """

    def __init__(self) -> None:
        self._current: List[Listener] = []
        self._next: List[Listener] = self._current

    def _ensure_mutable(self) -> None:
        if self._next is self._current:
            self._next = list(self._current)

    def add(self, listener: Listener) -> None:
        self._ensure_mutable()
        self._next.append(listener)

    def remove(self, listener: Listener) -> None:
        """
        Remove the first registration of listener, compared by identity.

        Removing a listener that is not registered is a no-op.
        """
        self._ensure_mutable()
        for index, registered in enumerate(self._next):
            if registered is listener:
                del self._next[index]
                return

    def snapshot(self) -> List[Listener]:
        """
        Publish the working list as the notified list and return it.

        The returned list is never mutated afterwards.
        """
        self._current = self._next
        return self._current

    def __len__(self) -> int:
        return len(self._next)
