# numrows/app/main.py
from __future__ import annotations

import os
import random
from typing import Callable, Optional

# ---- ViewModels ----
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.sorted_list_vm import SortedListVM

# ---- UseCases ----
from ..usecases.add_row import AddRow
from ..usecases.remove_row import RemoveRow

from ..domain.ports import RandomSource, TableViewPort, UseCaseError
from ..utils import logging as logging_utils
from .table_presenter import TablePresenter


def build_table(
    view: TableViewPort,
    settings: Optional[SettingsVM] = None,
    *,
    rng: Optional[RandomSource] = None,
    on_error: Optional[Callable[[UseCaseError], None]] = None,
) -> TablePresenter:
    """Wire view-model, use cases and presenter for ``view`` and render the first state.

    Without explicit ``settings``, defaults are read from the ``NUMROWS_*`` environment.
    """
    if settings is None:
        settings = SettingsVM()
        settings.apply_env(os.environ)
    logging_utils.configure_root()
    logging_utils.apply_preferences(settings.debug_logging)

    if rng is None:
        rng = random.Random(settings.random_seed)

    vm = SortedListVM(settings.initial_items, random_upper=settings.random_upper, rng=rng)
    presenter = TablePresenter(
        vm=vm,
        view=view,
        add_row=AddRow(vm),
        remove_row=RemoveRow(vm),
        on_error=on_error,
    )
    presenter.bind(settings.initial_items)
    return presenter


__all__ = ["build_table"]
