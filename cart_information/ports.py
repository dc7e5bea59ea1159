"""Collaborator interfaces consumed by the projector.

Each protocol is the narrow slice of a legacy store the projector needs.
Implementations raise ``StoreError`` for infrastructure failures and
``LocalizationError`` for formatting failures; the projector never catches
either.
"""

from typing import Optional, Protocol

from .legacy import (
    Address,
    Amount,
    AppliedCartRule,
    CartRuleFilter,
    Currency,
    Customer,
    CustomerAddress,
    DeliveryOptionList,
    Language,
    LegacyCart,
    PricingSummary,
)


class CartStore(Protocol):
    """Protocol for the legacy cart store."""

    def get(self, cart_id: int) -> Optional[LegacyCart]:
        """Return the cart, or None when no cart has that id."""
        ...

    def summary_details(self, cart: LegacyCart) -> PricingSummary:
        ...

    def delivery_option_list(self, cart: LegacyCart) -> DeliveryOptionList:
        ...

    def cart_rules(self, cart: LegacyCart, action: CartRuleFilter) -> list[AppliedCartRule]:
        ...


class CustomerStore(Protocol):
    """Protocol for the legacy customer store."""

    def get(self, customer_id: int) -> Customer:
        ...

    def list_addresses(self, customer: Customer, language_id: int) -> list[CustomerAddress]:
        ...


class AddressStore(Protocol):
    """Protocol for address and country lookups."""

    def get(self, address_id: int) -> Address:
        ...

    def is_country_active(self, address_id: int) -> bool:
        ...


class CurrencyStore(Protocol):
    def get(self, currency_id: int) -> Currency:
        ...


class LanguageStore(Protocol):
    def get(self, language_id: int) -> Language:
        ...


class CartRuleStore(Protocol):
    def id_by_code(self, code: str) -> Optional[int]:
        """Return the id of the cart rule with this code, or None."""
        ...


class PriceFormatter(Protocol):
    def format_price(self, amount: Amount, currency_code: str) -> str:
        ...


class ImageLinkBuilder(Protocol):
    def image_link(self, slug: str, image_id: str, size: str) -> str:
        ...


class AddressFormatter(Protocol):
    def generate(self, address: Address, separator: str = "\n") -> str:
        ...
