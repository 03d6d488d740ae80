from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.edits import Delete
from ..viewmodels.sorted_list_vm import SortedListVM
from .error_mapping import map_row_error

_log = logging.getLogger(__name__)


@dataclass
class RemoveRow:
    vm: SortedListVM

    def __call__(self, position: int) -> Delete:
        """Remove the row at ``position``; stale rows surface as STALE_ROW."""
        try:
            return self.vm.remove_value(position)
        except Exception as exc:
            error = map_row_error(exc, default_code="REMOVE_FAILED")
            _log.warning("Remove row %r failed (%s): %s", position, error.code, error.message)
            raise error from exc
