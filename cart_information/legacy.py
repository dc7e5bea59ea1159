"""Typed records for the data the legacy stores hand back.

The legacy cart model exposes its summary as a loosely keyed structure.
These records give each field an explicit type and default so the projector
depends on a data contract only.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import IntEnum
from typing import Optional, Union

Amount = Union[Decimal, int, float, str]


class CartRuleFilter(IntEnum):
    """Action filter accepted by ``CartStore.cart_rules``."""

    ALL = 1
    SHIPPING = 2
    REDUCTION = 3
    GIFT = 4
    ALL_NOCAP = 5


# Back-office orders get a free-shipping rule coded with this prefix + cart id.
BO_ORDER_CODE_PREFIX = "BO_ORDER_"


@dataclass(frozen=True)
class LegacyCart:
    id: int
    currency_id: int
    language_id: int
    customer_id: int
    address_delivery_id: int = 0
    address_invoice_id: int = 0


@dataclass(frozen=True)
class Currency:
    id: int
    iso_code: str
    precision: int = 2


@dataclass(frozen=True)
class Language:
    id: int
    iso_code: str = ""


@dataclass(frozen=True)
class Customer:
    id: int
    firstname: str = ""
    lastname: str = ""


@dataclass(frozen=True)
class CustomerAddress:
    """One row of a customer's address book listing."""

    address_id: int
    alias: str


@dataclass(frozen=True)
class Address:
    """Full postal address, as needed by an address formatter."""

    id: int
    firstname: str = ""
    lastname: str = ""
    company: str = ""
    address1: str = ""
    address2: str = ""
    postcode: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    phone: str = ""


@dataclass(frozen=True)
class SummaryProduct:
    product_id: int
    customization_id: int
    name: str
    reference: str
    price: str
    quantity: int
    total: str
    link_rewrite: str
    image_id: str
    attribute_id: int = 0
    attributes_small: str = ""


@dataclass(frozen=True)
class SummaryDiscount:
    cart_rule_id: int
    name: str
    description: str
    value_real: Amount


@dataclass(frozen=True)
class AssignedCarrier:
    """Carrier the cart currently ships with; id 0 means none assigned."""

    id: int = 0
    name: str = ""


@dataclass(frozen=True)
class PricingSummary:
    """Totals, rows and carrier computed by the legacy cart."""

    products: list[SummaryProduct] = field(default_factory=list)
    discounts: list[SummaryDiscount] = field(default_factory=list)
    total_products: Amount = Decimal("0")
    total_discounts_tax_exc: Amount = Decimal("0")
    total_shipping: Amount = Decimal("0")
    total_shipping_tax_exc: Amount = Decimal("0")
    total_tax: Amount = Decimal("0")
    total_price: Amount = Decimal("0")
    total_price_without_tax: Amount = Decimal("0")
    carrier: Optional[AssignedCarrier] = None


@dataclass(frozen=True)
class Carrier:
    id: int
    name: str
    delay: dict[int, str] = field(default_factory=dict)  # language id -> label


@dataclass(frozen=True)
class DeliveryOption:
    """A candidate group of carriers for one delivery address."""

    carriers: list[Carrier] = field(default_factory=list)


# address id -> delivery option groups for that address
DeliveryOptionList = dict[int, list[DeliveryOption]]


@dataclass(frozen=True)
class AppliedCartRule:
    """A cart rule applied to the cart, as listed by ``CartStore.cart_rules``."""

    cart_rule_id: int
    name: str = ""
    code: str = ""
