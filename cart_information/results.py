"""Query results for the cart information read model.

Every object here is built once by the projector and never mutated.
``to_dict`` gives the plain structure an upstream presentation layer
serializes.
"""

from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .validation import require_non_negative


@dataclass(frozen=True)
class CartProduct:
    """A line item of the cart."""

    product_id: int
    attribute_id: int
    customization_id: int
    name: str
    attribute: str
    reference: str
    unit_price: str
    quantity: int
    price: str
    image_link: str

    def __post_init__(self) -> None:
        require_non_negative(self.product_id, "product_id")
        require_non_negative(self.attribute_id, "attribute_id")
        require_non_negative(self.customization_id, "customization_id")
        require_non_negative(self.quantity, "quantity")


@dataclass(frozen=True)
class CartAddress:
    """A customer address the cart can ship or bill to."""

    address_id: int
    alias: str
    formatted_address: str
    is_delivery: bool
    is_invoice: bool

    def __post_init__(self) -> None:
        require_non_negative(self.address_id, "address_id")


@dataclass(frozen=True)
class CartRule:
    """A discount applied to the cart."""

    cart_rule_id: int
    name: str
    description: str
    value: str

    def __post_init__(self) -> None:
        require_non_negative(self.cart_rule_id, "cart_rule_id")


@dataclass(frozen=True)
class CartSummary:
    total_products_price: str
    total_discount: str
    total_shipping_price: str
    total_taxes: str
    total_price_with_taxes: str
    total_price_without_taxes: str


@dataclass(frozen=True)
class CartDeliveryOption:
    carrier_id: int
    carrier_name: str
    carrier_delay: str

    def __post_init__(self) -> None:
        require_non_negative(self.carrier_id, "carrier_id")


@dataclass(frozen=True)
class CartShipping:
    """Delivery information for the cart's delivery address."""

    total_shipping_price: str
    is_free_shipping: bool
    delivery_options: tuple[CartDeliveryOption, ...] = ()
    selected_carrier_id: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "delivery_options", tuple(self.delivery_options))

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_shipping_price": self.total_shipping_price,
            "is_free_shipping": self.is_free_shipping,
            "delivery_options": [asdict(option) for option in self.delivery_options],
            "selected_carrier_id": self.selected_carrier_id,
        }


@dataclass(frozen=True)
class CartInformation:
    """Read model of a cart: products, rules, addresses, totals and shipping.

    Sequences are stored as tuples and ``addresses`` as a read-only mapping
    keyed by address id, so the model stays hashable and unchanged after
    construction. ``shipping`` is None when the
    customer has no usable address or the delivery address has no delivery
    options.
    """

    cart_id: int
    products: tuple[CartProduct, ...]
    currency_id: int
    language_id: int
    cart_rules: tuple[CartRule, ...]
    addresses: Mapping[int, CartAddress] = field(hash=False)
    summary: CartSummary
    shipping: Optional[CartShipping] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", tuple(self.products))
        object.__setattr__(self, "cart_rules", tuple(self.cart_rules))
        object.__setattr__(self, "addresses", MappingProxyType(dict(self.addresses)))
        require_non_negative(self.cart_id, "cart_id")
        require_non_negative(self.currency_id, "currency_id")
        require_non_negative(self.language_id, "language_id")
        if self.shipping is not None and not self.addresses:
            raise ValueError("shipping requires at least one address")

    def to_dict(self) -> dict[str, Any]:
        """Return the read model as plain dicts, lists and scalars."""
        return {
            "cart_id": self.cart_id,
            "products": [asdict(product) for product in self.products],
            "currency_id": self.currency_id,
            "language_id": self.language_id,
            "cart_rules": [asdict(rule) for rule in self.cart_rules],
            "addresses": {
                address_id: asdict(address)
                for address_id, address in self.addresses.items()
            },
            "summary": asdict(self.summary),
            "shipping": self.shipping.to_dict() if self.shipping is not None else None,
        }
