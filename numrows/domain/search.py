from __future__ import annotations

from typing import Sequence


def upper_boundary(items: Sequence[int], key: int) -> int:
    """
    Return the index where ``key`` keeps ``items`` sorted, after equal values.

    ``items`` must already be sorted non-decreasing; the order is not
    validated. Returns ``0`` for an empty sequence and ``len(items)`` when
    ``key`` is not smaller than the last element.
    """
    low = 0
    high = len(items)
    while low < high:
        mid = low + (high - low) // 2
        if items[mid] <= key:
            low = mid + 1
        else:
            high = mid
    return low


__all__ = ["upper_boundary"]
