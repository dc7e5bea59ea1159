"""Error types for the cart information query."""

from typing import Optional


class errmsg:
    """Error message constants for the cart information query."""

    CART_NOT_FOUND = 'Cart with id "{cart_id}" was not found'
    CART_ID_INVALID = "Invalid cart id: {cart_id!r}"
    UNKNOWN_CURRENCY = "Unknown currency code {code!r}"
    UNKNOWN_LOCALE = "Unknown locale {locale!r}"
    INVALID_AMOUNT = "Cannot format amount {amount!r}"


class CartInformationError(Exception):
    """Base class for cart information errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class CartConstraintError(CartInformationError):
    """The cart id is not a positive integer."""

    def __init__(self, cart_id: object):
        super().__init__(errmsg.CART_ID_INVALID.format(cart_id=cart_id))
        self.cart_id = cart_id


class CartNotFoundError(CartInformationError):
    """No cart exists for the requested id."""

    def __init__(self, cart_id: int):
        super().__init__(errmsg.CART_NOT_FOUND.format(cart_id=cart_id))
        self.cart_id = cart_id


class LocalizationError(CartInformationError):
    """A monetary value could not be formatted for the resolved currency."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"localization failed: {message}", cause)


class StoreError(CartInformationError):
    """A legacy store failed while serving the query."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"store failure: {message}", cause)
