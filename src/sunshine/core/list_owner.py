"""Protocols for the list that owns a SelectionTracker."""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


class RowHolder(Protocol):
    """A bound row: its view plus its current adapter position."""

    view: Any
    position: int


@runtime_checkable
class Checkable(Protocol):
    def set_checked(self, checked: bool) -> None: ...


class ListOwner(Protocol):
    """What a SelectionTracker needs from the list it is attached to."""

    def item_count(self) -> int: ...

    def has_stable_ids(self) -> bool: ...

    def stable_id_at(self, position: int) -> int: ...

    def rebind_view(self, holder: RowHolder, position: int) -> None:
        """Re-render one row immediately."""

    def request_visual_refresh(self, position: int) -> None:
        """Schedule a (possibly batched) re-render of one row."""

    def register_observer(self, callback: Callable[[], Any]) -> None: ...
