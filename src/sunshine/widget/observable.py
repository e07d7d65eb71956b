"""DataSetObservable: callback registry for list data changes."""

from __future__ import annotations

from typing import Callable, Any


ChangeCallback = Callable[[], Any]


class DataSetObservable:
    """Notifies registered callbacks whenever the list's data changes.

    Callbacks run synchronously, in registration order, on the caller's
    thread.
    """

    def __init__(self) -> None:
        self._callbacks: list[ChangeCallback] = []

    def register(self, callback: ChangeCallback) -> None:
        """Register a callback: fn()."""
        if callback in self._callbacks:
            raise ValueError(f"Observer {callback!r} is already registered.")
        self._callbacks.append(callback)

    def unregister(self, callback: ChangeCallback) -> None:
        if callback not in self._callbacks:
            raise ValueError(f"Observer {callback!r} was not registered.")
        self._callbacks.remove(callback)

    def notify_changed(self) -> None:
        for cb in list(self._callbacks):
            cb()

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        return f"DataSetObservable(observers={len(self._callbacks)})"
