"""Domain-level error types for use-case and presenter mapping.

Errors defined here cross layer boundaries unchanged; use cases translate them
into ``UseCaseError`` instances before they reach the view.
"""

from __future__ import annotations


class OutOfRangeError(IndexError):
    """Raised when a row position does not address an existing element."""

    def __init__(self, position: int, length: int) -> None:
        super().__init__(f"Row {position} is out of range for {length} item(s).")
        self.position = position
        self.length = length


__all__ = ["OutOfRangeError"]
