from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.edits import Insert
from ..viewmodels.sorted_list_vm import SortedListVM
from .error_mapping import map_row_error

_log = logging.getLogger(__name__)


@dataclass
class AddRow:
    vm: SortedListVM

    def __call__(self, value: Optional[int] = None) -> Insert:
        """Insert ``value`` (random when omitted) and return the produced edit."""
        try:
            return self.vm.add_value(value)
        except Exception as exc:
            error = map_row_error(exc, default_code="ADD_FAILED")
            _log.warning("Add row failed (%s): %s", error.code, error.message)
            raise error from exc
