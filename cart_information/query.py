"""The GetCartInformation query."""

from dataclasses import dataclass

from .validation import require_cart_id


@dataclass(frozen=True)
class GetCartInformation:
    """Ask for the read model of one cart.

    Raises CartConstraintError when ``cart_id`` is not a positive int.
    """

    cart_id: int

    def __post_init__(self) -> None:
        require_cart_id(self.cart_id)
