from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, List, Optional, Tuple

from ..domain.edits import Delete, Edit, Initial, Insert, RowsState
from ..domain.errors import OutOfRangeError
from ..domain.ports import RandomSource
from ..domain.search import upper_boundary

DEFAULT_ITEMS: Tuple[int, ...] = (1, 2, 3)
DEFAULT_RANDOM_UPPER = 10


class SortedListVM:
    """Owns the sorted rows and publishes a RowsState after every mutation.

    Responsibilities
    - Keep the rows non-decreasing by inserting at the upper boundary.
    - Describe each mutation as an Insert/Delete/Initial edit.
    - Notify ``on_state_changed`` synchronously, exactly once per operation.

    The view-model is not thread-safe; callers serialize access.
    """

    def __init__(
        self,
        items: Iterable[int] = DEFAULT_ITEMS,
        *,
        on_state_changed: Optional[Callable[[RowsState], None]] = None,
        random_upper: int = DEFAULT_RANDOM_UPPER,
        rng: Optional[RandomSource] = None,
    ) -> None:
        if isinstance(random_upper, bool) or not isinstance(random_upper, int) or random_upper < 1:
            raise ValueError("random_upper must be a positive integer.")
        self._log = logging.getLogger(__name__)
        self._items: List[int] = list(items)
        self._edit: Edit = Initial()
        self.on_state_changed = on_state_changed
        self.random_upper = random_upper
        self._rng: RandomSource = rng if rng is not None else random.Random()

    # ---- Read API (called by presenter/view) ----
    @property
    def state(self) -> RowsState:
        return RowsState(items=tuple(self._items), edit=self._edit)

    @property
    def items(self) -> Tuple[int, ...]:
        return tuple(self._items)

    @property
    def edit(self) -> Edit:
        return self._edit

    @property
    def count(self) -> int:
        return len(self._items)

    def text_at(self, row: int) -> str:
        return str(self._items[row])

    def upper_boundary(self, value: int) -> int:
        return upper_boundary(self._items, value)

    # ---- Commands ----
    def initialize(self, values: Iterable[int]) -> None:
        """Replace the rows with ``values`` (already sorted) and publish a full refresh."""
        self._items = list(values)
        self._edit = Initial()
        self._log.debug("Initialized %d row(s).", len(self._items))
        self._notify()

    def add_value(self, value: Optional[int] = None) -> Insert:
        """Insert ``value``, or a random value in ``[0, random_upper)``, at its sorted row."""
        if value is None:
            value = self._rng.randrange(self.random_upper)
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Row values must be integers, got {type(value).__name__}.")

        edit = Insert(value=value, position=self.upper_boundary(value))
        self._items.insert(edit.position, edit.value)
        self._edit = edit
        self._log.debug("Inserted %d at row %d.", edit.value, edit.position)
        self._notify()
        return edit

    def remove_value(self, position: int) -> Delete:
        """Remove the row at ``position``; negative positions are rejected, not wrapped."""
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f"Row positions must be integers, got {type(position).__name__}.")
        if not 0 <= position < len(self._items):
            raise OutOfRangeError(position, len(self._items))

        edit = Delete(position=position)
        removed = self._items.pop(position)
        self._edit = edit
        self._log.debug("Removed %d from row %d.", removed, position)
        self._notify()
        return edit

    # ------------------------------------------------------------------
    def _notify(self) -> None:
        if self.on_state_changed:
            self.on_state_changed(self.state)


__all__ = ["DEFAULT_ITEMS", "DEFAULT_RANDOM_UPPER", "SortedListVM"]
