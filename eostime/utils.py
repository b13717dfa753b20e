"""Small integer helpers shared across the package."""

from __future__ import annotations

__all__ = ["divrem"]


def divrem(lhs: int, rhs: int) -> tuple[int, int]:
    """Return the quotient and remainder of truncating division.

    Unlike the builtin ``divmod``, the quotient is rounded towards zero and the
    remainder takes the sign of ``lhs``.
    """
    if rhs == 0:
        raise ZeroDivisionError("divrem() by zero")
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient
    return quotient, lhs - rhs * quotient