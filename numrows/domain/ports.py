from __future__ import annotations
from typing import Protocol, Sequence

Row = int


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class TableViewPort(Protocol):
    """Row-level update surface implemented by the presentation layer."""

    def reload_data(self) -> None: ...
    def insert_rows(self, rows: Sequence[Row]) -> None: ...
    def delete_rows(self, rows: Sequence[Row]) -> None: ...


class RandomSource(Protocol):
    """Subset of ``random.Random`` used to draw values for new rows."""

    def randrange(self, stop: int) -> int: ...
