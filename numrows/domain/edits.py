"""Edit descriptors and state snapshots published by the sorted list view-model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


def _require_position(name: str, position: int) -> None:
    if isinstance(position, bool) or not isinstance(position, int):
        raise TypeError(f"{name} position must be an integer.")
    if position < 0:
        raise ValueError(f"{name} position must be non-negative.")


@dataclass(frozen=True)
class Initial:
    """No structural change; the view should reload every row."""


@dataclass(frozen=True)
class Insert:
    """A value was placed at ``position``; rows at and after it moved down."""

    value: int
    """Integer that was inserted."""

    position: int
    """Row index of the new value, valid against the length before insertion."""

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Insert value must be an integer.")
        _require_position("Insert", self.position)


@dataclass(frozen=True)
class Delete:
    """The element previously at ``position`` was removed."""

    position: int
    """Row index of the removed value, valid against the length before removal."""

    def __post_init__(self) -> None:
        _require_position("Delete", self.position)


Edit = Union[Initial, Insert, Delete]


@dataclass(frozen=True)
class RowsState:
    """Read-only snapshot of the table rows together with the edit that produced it."""

    items: Tuple[int, ...]
    edit: Edit

    def __post_init__(self) -> None:
        # Observers must never see the store's own list.
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def count(self) -> int:
        return len(self.items)

    def text_at(self, row: int) -> str:
        """Return the cell label for ``row``."""
        return str(self.items[row])


__all__ = ["Delete", "Edit", "Initial", "Insert", "RowsState"]
