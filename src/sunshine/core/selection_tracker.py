"""SelectionTracker: checked-row state that survives list data changes.

Keeps two views of the same selection:

- checked positions: position -> flag, used for rendering
- checked ids: stable id -> last known position, used to find rows again
  after the list is refreshed, re-sorted or has rows inserted/removed

When the owner's data changes, positions are rebuilt from ids. A checked
id that moved is looked for within ``search_distance`` positions of where
it was last seen; if it is not found there it is unchecked.
"""

from __future__ import annotations

import logging

from .choice_mode import ChoiceMode, NO_POSITION
from .list_owner import Checkable, ListOwner, RowHolder
from ..widget.serializers import deserialize_selection, serialize_selection

logger = logging.getLogger(__name__)

# How many positions in either direction to search for a checked id that
# moved across a data set change.
CHECK_POSITION_SEARCH_DISTANCE = 20

SELECTED_ITEMS_KEY = "SIK"


class SelectionTracker:
    """Tracks which rows of a list owner are checked.

    Parameters
    ----------
    owner : ListOwner
        The list whose rows are tracked. The tracker registers itself as
        a data-change observer on construction.
    search_distance : int
        Window radius used when relocating a checked id after a change.
    """

    def __init__(
        self,
        owner: ListOwner,
        search_distance: int = CHECK_POSITION_SEARCH_DISTANCE,
    ) -> None:
        if search_distance < 0:
            raise ValueError(f"search_distance must be >= 0, got {search_distance}.")
        self._owner = owner
        self._search_distance = search_distance
        self._mode = ChoiceMode.NONE
        self._checked_positions: dict[int, bool] = {}
        self._checked_ids: dict[int, int] = {}
        owner.register_observer(self._on_data_changed)

    @property
    def mode(self) -> ChoiceMode:
        return self._mode

    @property
    def search_distance(self) -> int:
        return self._search_distance

    @search_distance.setter
    def search_distance(self, value: int) -> None:
        """Window radius for the next reconciliation; current state is kept."""
        if value < 0:
            raise ValueError(f"search_distance must be >= 0, got {value}.")
        self._search_distance = value

    @property
    def checked_positions(self) -> dict[int, bool]:
        """Copy of the position -> flag map, including unchecked entries."""
        return dict(self._checked_positions)

    @property
    def checked_ids(self) -> dict[int, int]:
        """Copy of the stable id -> last known position map."""
        return dict(self._checked_ids)

    def set_mode(self, mode: ChoiceMode | int) -> None:
        """Change the choice mode. Switching modes clears all selections."""
        mode = ChoiceMode(mode)
        if mode != self._mode:
            self._mode = mode
            self.clear_selections()

    def on_item_activated(self, holder: RowHolder) -> None:
        """Apply a tap/click on a row according to the current mode."""
        if self._mode == ChoiceMode.NONE:
            return

        position = holder.position
        if position == NO_POSITION or not 0 <= position < self._owner.item_count():
            logger.debug("Unable to set item state: no adapter position %d", position)
            return

        if self._mode == ChoiceMode.SINGLE:
            if not self._checked_positions.get(position, False):
                try:
                    stable_id = self._owner.stable_id_at(position)
                except IndexError:
                    logger.debug("Unable to set item state: no stable id at %d", position)
                    return
                for previous in list(self._checked_positions):
                    self._owner.request_visual_refresh(previous)
                self._checked_positions.clear()
                self._checked_positions[position] = True
                self._checked_ids.clear()
                self._checked_ids[stable_id] = position
            # Rebind directly; a refresh request would drop focus from this row.
            self._owner.rebind_view(holder, position)
        elif self._mode == ChoiceMode.MULTIPLE:
            checked = self._checked_positions.get(position, False)
            self._checked_positions[position] = not checked
            self._owner.rebind_view(holder, position)
        elif self._mode == ChoiceMode.MULTIPLE_MODAL:
            raise NotImplementedError(
                "Multiple modal choice mode is not implemented in SelectionTracker."
            )

    def is_checked(self, position: int) -> bool:
        return self._checked_positions.get(position, False)

    def bind_visual_state(self, view, position: int) -> None:
        """Set the checked/activated attributes of a row view."""
        checked = self.is_checked(position)
        if isinstance(view, Checkable):
            view.set_checked(checked)
        view.activated = checked

    def get_selected_position(self) -> int:
        """Lowest checked position, or NO_POSITION when nothing is checked."""
        checked = [p for p, flag in self._checked_positions.items() if flag]
        if not checked:
            return NO_POSITION
        return min(checked)

    def clear_selections(self) -> None:
        self._checked_positions.clear()
        self._checked_ids.clear()

    def reconcile_after_data_change(self, item_count: int) -> None:
        """Rebuild checked positions from checked ids after a data change.

        Ids still at their last known position stay there. Ids that moved
        at most ``search_distance`` rows are followed to their new position.
        Anything further away (or gone) is unchecked.
        """
        if not self._owner.has_stable_ids():
            logger.debug("Owner has no stable ids; keeping positional selection")
            return

        self._checked_positions.clear()
        reconciled: dict[int, int] = {}

        for stable_id, last_pos in self._checked_ids.items():
            if 0 <= last_pos < item_count and self._owner.stable_id_at(last_pos) == stable_id:
                self._checked_positions[last_pos] = True
                reconciled[stable_id] = last_pos
                continue

            found = self._search_nearby(stable_id, last_pos, item_count)
            if found is None:
                logger.debug(
                    "Checked id %d not found within %d of position %d; unchecking",
                    stable_id, self._search_distance, last_pos,
                )
                continue
            self._checked_positions[found] = True
            reconciled[stable_id] = found

        self._checked_ids = reconciled

    def _search_nearby(self, stable_id: int, last_pos: int, item_count: int) -> int | None:
        start = max(0, last_pos - self._search_distance)
        end = min(last_pos + self._search_distance + 1, item_count)
        for search_pos in range(start, end):
            if self._owner.stable_id_at(search_pos) == stable_id:
                return search_pos
        return None

    def _on_data_changed(self) -> None:
        if self._owner.has_stable_ids():
            self.reconcile_after_data_change(self._owner.item_count())

    # --- Instance state ---

    def serialize_state(self) -> bytes:
        return serialize_selection(self._checked_positions, self._checked_ids)

    def restore_state(self, blob: bytes) -> None:
        """Replace the current selection with a serialized one."""
        self._checked_positions, self._checked_ids = deserialize_selection(blob)

    def save_instance_state(self, bundle: dict) -> None:
        bundle[SELECTED_ITEMS_KEY] = self.serialize_state()

    def restore_instance_state(self, bundle: dict) -> None:
        blob = bundle.get(SELECTED_ITEMS_KEY)
        if blob is not None:
            self.restore_state(blob)

    def __repr__(self) -> str:
        return (
            f"SelectionTracker(mode={self._mode.name}, "
            f"checked={sum(self._checked_positions.values())}, "
            f"ids={len(self._checked_ids)})"
        )
