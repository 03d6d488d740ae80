"""Translate domain errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from numrows.domain.errors import OutOfRangeError
from numrows.domain.ports import UseCaseError


def map_row_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map view-model exceptions to stable UseCaseError codes.

    Args:
        exc (Exception): Error raised by a view-model command.
        default_code (str): Code used when ``exc`` has no dedicated mapping.
        default_message (Optional[str]): Message used for unmapped errors.

    Returns:
        UseCaseError: Error safe to show to the user.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, OutOfRangeError):
        return UseCaseError(
            "STALE_ROW",
            f"Row {exc.position} no longer exists ({exc.length} row(s) shown). Refresh the table.",
        )
    if isinstance(exc, (TypeError, ValueError)):
        return UseCaseError("INVALID_VALUE", str(exc) or "Invalid value.")

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


__all__ = ["map_row_error"]
