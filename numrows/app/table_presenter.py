"""UI-facing presenter that turns row edits into targeted table updates."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from numrows.domain.edits import Delete, Initial, Insert, RowsState
from numrows.domain.ports import TableViewPort, UseCaseError
from numrows.usecases.add_row import AddRow
from numrows.usecases.remove_row import RemoveRow
from numrows.viewmodels.sorted_list_vm import SortedListVM


class TablePresenter:
    """Binds a SortedListVM to a table view and forwards row commands."""

    def __init__(
        self,
        *,
        vm: SortedListVM,
        view: TableViewPort,
        add_row: AddRow,
        remove_row: RemoveRow,
        on_error: Optional[Callable[[UseCaseError], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.vm = vm
        self.view = view
        self._add_row = add_row
        self._remove_row = remove_row
        self.on_error = on_error

    def bind(self, initial_items: Iterable[int]) -> None:
        """Subscribe to the view-model and publish the first full render."""
        self.vm.on_state_changed = self.render
        self.vm.initialize(initial_items)

    def render(self, state: RowsState) -> None:
        edit = state.edit
        if isinstance(edit, Initial):
            self.view.reload_data()
        elif isinstance(edit, Insert):
            self.view.insert_rows([edit.position])
        elif isinstance(edit, Delete):
            self.view.delete_rows([edit.position])
        else:
            raise TypeError(f"Unsupported edit: {edit!r}")

    # ---- Data source (called by View) ----
    def number_of_rows(self) -> int:
        return self.vm.count

    def cell_text(self, row: int) -> str:
        return self.vm.text_at(row)

    def can_edit_row(self, row: int) -> bool:
        return True

    # ---- Commands surfaced to View ----
    def cmd_add(self, value: Optional[int] = None) -> None:
        try:
            self._add_row(value)
        except UseCaseError as err:
            self._report(err)

    def cmd_commit_delete(self, row: int) -> None:
        try:
            self._remove_row(row)
        except UseCaseError as err:
            self._report(err)

    def _report(self, err: UseCaseError) -> None:
        if self.on_error is None:
            raise err
        self._log.debug("Forwarding %s to view: %s", err.code, err.message)
        self.on_error(err)
