"""In-memory legacy stores and a ready-made shop for projector tests.

``make_shop()`` builds cart 42: one active-country address (7) chosen for
delivery and invoice, one address in an inactive country (8), two products,
one discount and two delivery option groups that both offer carrier 3.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Optional

from cart_information import (
    Address,
    AppliedCartRule,
    AssignedCarrier,
    Carrier,
    CartInformationProjector,
    CartRuleFilter,
    Currency,
    Customer,
    CustomerAddress,
    DeliveryOption,
    Language,
    LegacyCart,
    PricingSummary,
    SummaryDiscount,
    SummaryProduct,
)


class FakeCartStore:
    def __init__(self):
        self.carts: dict[int, LegacyCart] = {}
        self.summaries: dict[int, PricingSummary] = {}
        self.delivery_options: dict[int, dict] = {}
        self.rules: dict[int, list[AppliedCartRule]] = {}
        self.rule_filters: list[CartRuleFilter] = []

    def get(self, cart_id: int) -> Optional[LegacyCart]:
        return self.carts.get(cart_id)

    def summary_details(self, cart: LegacyCart) -> PricingSummary:
        return self.summaries.get(cart.id, PricingSummary())

    def delivery_option_list(self, cart: LegacyCart) -> dict:
        return self.delivery_options.get(cart.id, {})

    def cart_rules(self, cart: LegacyCart, action: CartRuleFilter) -> list[AppliedCartRule]:
        self.rule_filters.append(action)
        return list(self.rules.get(cart.id, []))


class FakeCustomerStore:
    def __init__(self):
        self.customers: dict[int, Customer] = {}
        self.addresses: dict[int, list[CustomerAddress]] = {}

    def get(self, customer_id: int) -> Customer:
        return self.customers[customer_id]

    def list_addresses(self, customer: Customer, language_id: int) -> list[CustomerAddress]:
        return list(self.addresses.get(customer.id, []))


class FakeAddressStore:
    def __init__(self):
        self.addresses: dict[int, Address] = {}
        self.inactive_country: set[int] = set()

    def get(self, address_id: int) -> Address:
        return self.addresses[address_id]

    def is_country_active(self, address_id: int) -> bool:
        return address_id not in self.inactive_country


class FakeCurrencyStore:
    def __init__(self, *currencies: Currency):
        self.currencies = {c.id: c for c in currencies}

    def get(self, currency_id: int) -> Currency:
        return self.currencies[currency_id]


class FakeLanguageStore:
    def __init__(self, *languages: Language):
        self.languages = {lang.id: lang for lang in languages}

    def get(self, language_id: int) -> Language:
        return self.languages[language_id]


class FakeCartRuleStore:
    def __init__(self):
        self.codes: dict[str, int] = {}

    def id_by_code(self, code: str) -> Optional[int]:
        return self.codes.get(code)


class DollarFormatter:
    """Renders amounts as ``$12.50``; records every call."""

    def __init__(self):
        self.calls: list[tuple] = []

    def format_price(self, amount, currency_code: str) -> str:
        self.calls.append((amount, currency_code))
        return f"${Decimal(str(amount)):.2f}"


class RecordingImageLinks:
    def __init__(self):
        self.calls: list[tuple[str, str, str]] = []

    def image_link(self, slug: str, image_id: str, size: str) -> str:
        self.calls.append((slug, image_id, size))
        return f"https://shop.test/{image_id}-{size}/{slug}.jpg"


class PipeAddressFormatter:
    def generate(self, address: Address, separator: str = "\n") -> str:
        return separator.join(part for part in (address.address1, address.city) if part)


@dataclass
class Shop:
    """All collaborators of one projector, open for per-test tweaks."""

    carts: FakeCartStore = field(default_factory=FakeCartStore)
    customers: FakeCustomerStore = field(default_factory=FakeCustomerStore)
    addresses: FakeAddressStore = field(default_factory=FakeAddressStore)
    currencies: FakeCurrencyStore = field(
        default_factory=lambda: FakeCurrencyStore(Currency(id=1, iso_code="USD"))
    )
    languages: FakeLanguageStore = field(
        default_factory=lambda: FakeLanguageStore(Language(id=1, iso_code="en"), Language(id=2, iso_code="fr"))
    )
    cart_rules: FakeCartRuleStore = field(default_factory=FakeCartRuleStore)
    formatter: DollarFormatter = field(default_factory=DollarFormatter)
    image_links: RecordingImageLinks = field(default_factory=RecordingImageLinks)
    address_formatter: PipeAddressFormatter = field(default_factory=PipeAddressFormatter)
    context_lang_id: int = 1

    def projector(self, logger=None) -> CartInformationProjector:
        return CartInformationProjector(
            carts=self.carts,
            customers=self.customers,
            addresses=self.addresses,
            currencies=self.currencies,
            languages=self.languages,
            cart_rules=self.cart_rules,
            price_formatter=self.formatter,
            image_links=self.image_links,
            address_formatter=self.address_formatter,
            context_lang_id=self.context_lang_id,
            logger=logger,
        )

    def set_summary(self, cart_id: int, **changes) -> None:
        base = self.carts.summaries.get(cart_id, PricingSummary())
        self.carts.summaries[cart_id] = replace(base, **changes)


CART_ID = 42
CUSTOMER_ID = 5


def make_products() -> list[SummaryProduct]:
    return [
        SummaryProduct(
            product_id=1,
            attribute_id=11,
            customization_id=0,
            name="Hummingbird T-shirt",
            attributes_small="S, White",
            reference="demo_1",
            price="$19.12",
            quantity=2,
            total="$38.24",
            link_rewrite="hummingbird-t-shirt",
            image_id="1-1",
        ),
        SummaryProduct(
            product_id=2,
            customization_id=3,
            name="Mug",
            reference="demo_2",
            price="$11.90",
            quantity=1,
            total="$11.90",
            link_rewrite="mug",
            image_id="2",
        ),
    ]


def make_shop() -> Shop:
    shop = Shop()
    shop.carts.carts[CART_ID] = LegacyCart(
        id=CART_ID,
        currency_id=1,
        language_id=1,
        customer_id=CUSTOMER_ID,
        address_delivery_id=7,
        address_invoice_id=7,
    )
    shop.carts.summaries[CART_ID] = PricingSummary(
        products=make_products(),
        discounts=[
            SummaryDiscount(
                cart_rule_id=9,
                name="Summer sale",
                description="10% off",
                value_real=Decimal("5.01"),
            )
        ],
        total_products=Decimal("50.14"),
        total_discounts_tax_exc=Decimal("0"),
        total_shipping=Decimal("7.00"),
        total_shipping_tax_exc=Decimal("7.00"),
        total_tax=Decimal("4.10"),
        total_price=Decimal("56.23"),
        total_price_without_tax=Decimal("52.13"),
        carrier=AssignedCarrier(id=3, name="Standard"),
    )
    shop.carts.delivery_options[CART_ID] = {
        7: [
            DeliveryOption(carriers=[Carrier(id=3, name="Standard", delay={1: "3-4 days", 2: "3-4 jours"})]),
            DeliveryOption(carriers=[Carrier(id=3, name="Standard-dup", delay={1: "2 days"})]),
        ]
    }
    shop.customers.customers[CUSTOMER_ID] = Customer(id=CUSTOMER_ID, firstname="Ada", lastname="Byron")
    shop.customers.addresses[CUSTOMER_ID] = [
        CustomerAddress(address_id=7, alias="Home"),
        CustomerAddress(address_id=8, alias="Abroad"),
    ]
    shop.addresses.addresses[7] = Address(id=7, address1="12 Main St", city="Springfield")
    shop.addresses.addresses[8] = Address(id=8, address1="1 Rue Nulle", city="Nowhere")
    shop.addresses.inactive_country.add(8)
    return shop
