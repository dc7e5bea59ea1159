"""Validation helpers for result invariants.

Result dataclasses call these from ``__post_init__`` so a row with a
negative id or quantity can never be constructed.
"""

from .errors import CartConstraintError


def require_non_negative(value: int, field: str) -> None:
    """Require that an integer field is zero or greater."""
    if value < 0:
        raise ValueError(f"{field} must be non-negative, got {value}")


def require_positive(value: int, field: str) -> None:
    """Require that an integer field is greater than zero."""
    if value <= 0:
        raise ValueError(f"{field} must be positive, got {value}")


def require_cart_id(cart_id: object) -> int:
    """Return ``cart_id`` if it is a positive int, else raise CartConstraintError."""
    if isinstance(cart_id, bool) or not isinstance(cart_id, int) or cart_id <= 0:
        raise CartConstraintError(cart_id)
    return cart_id
