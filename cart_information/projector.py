"""CartInformationProjector - builds the cart information read model.

Composes the legacy cart, customer, address, currency and carrier data into
``CartInformation``. Totals, taxes and delivery options are computed by the
stores; this module only extracts, filters and formats.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import structlog

from .errors import CartNotFoundError
from .legacy import (
    BO_ORDER_CODE_PREFIX,
    CartRuleFilter,
    Currency,
    DeliveryOptionList,
    LegacyCart,
    PricingSummary,
)
from .ports import (
    AddressFormatter,
    AddressStore,
    CartRuleStore,
    CartStore,
    CurrencyStore,
    CustomerStore,
    ImageLinkBuilder,
    LanguageStore,
    PriceFormatter,
)
from .query import GetCartInformation
from .results import (
    CartAddress,
    CartDeliveryOption,
    CartInformation,
    CartProduct,
    CartRule,
    CartShipping,
    CartSummary,
)

PRODUCT_IMAGE_SIZE = "small_default"
ADDRESS_LINE_SEPARATOR = "<br />"


class CartInformationProjector:
    """Projects a cart id into its ``CartInformation`` read model.

    The projector holds no per-call state; one instance can serve
    concurrent queries as long as its collaborators can.
    """

    def __init__(
        self,
        *,
        carts: CartStore,
        customers: CustomerStore,
        addresses: AddressStore,
        currencies: CurrencyStore,
        languages: LanguageStore,
        cart_rules: CartRuleStore,
        price_formatter: PriceFormatter,
        image_links: ImageLinkBuilder,
        address_formatter: AddressFormatter,
        context_lang_id: int,
        logger=None,
    ):
        self._carts = carts
        self._customers = customers
        self._addresses = addresses
        self._currencies = currencies
        self._languages = languages
        self._cart_rules = cart_rules
        self._price_formatter = price_formatter
        self._image_links = image_links
        self._address_formatter = address_formatter
        self._context_lang_id = context_lang_id
        self._log = logger or structlog.get_logger(__name__)

    def project(self, cart_id: int) -> CartInformation:
        """Build the read model for ``cart_id``.

        Args:
            cart_id: Positive cart identifier.

        Returns:
            The populated CartInformation.

        Raises:
            CartConstraintError: cart_id is not a positive int.
            CartNotFoundError: no cart has this id.
            LocalizationError: an amount could not be formatted.
            StoreError: a legacy store failed.
        """
        return self.handle(GetCartInformation(cart_id))

    def handle(self, query: GetCartInformation) -> CartInformation:
        """Answer a GetCartInformation query. See ``project``."""
        log = self._log.bind(cart_id=query.cart_id)
        log.info("projecting_cart_information")

        cart = self._get_cart(query.cart_id)
        currency = self._currencies.get(cart.currency_id)
        language = self._languages.get(cart.language_id)

        summary = self._carts.summary_details(cart)
        addresses = self._get_addresses(cart, log)

        information = CartInformation(
            cart_id=cart.id,
            products=self._extract_products(summary),
            currency_id=currency.id,
            language_id=language.id,
            cart_rules=self._extract_cart_rules(summary, currency),
            addresses=addresses,
            summary=self._extract_summary(summary, currency),
            shipping=self._extract_shipping(cart, summary, log) if addresses else None,
        )

        log.info(
            "cart_information_projected",
            products=len(information.products),
            addresses=len(information.addresses),
            has_shipping=information.shipping is not None,
        )
        return information

    def _get_cart(self, cart_id: int) -> LegacyCart:
        cart = self._carts.get(cart_id)
        if cart is None or cart.id != cart_id:
            raise CartNotFoundError(cart_id)
        return cart

    def _get_addresses(self, cart: LegacyCart, log) -> dict[int, CartAddress]:
        customer = self._customers.get(cart.customer_id)
        cart_addresses: dict[int, CartAddress] = {}

        for row in self._customers.list_addresses(customer, cart.language_id):
            address_id = int(row.address_id)

            if not self._addresses.is_country_active(address_id):
                log.debug("address_skipped_inactive_country", address_id=address_id)
                continue

            cart_addresses[address_id] = CartAddress(
                address_id=address_id,
                alias=row.alias,
                formatted_address=self._address_formatter.generate(
                    self._addresses.get(address_id), separator=ADDRESS_LINE_SEPARATOR
                ),
                is_delivery=int(cart.address_delivery_id) == address_id,
                is_invoice=int(cart.address_invoice_id) == address_id,
            )

        return cart_addresses

    def _extract_cart_rules(self, summary: PricingSummary, currency: Currency) -> list[CartRule]:
        return [
            CartRule(
                cart_rule_id=int(discount.cart_rule_id),
                name=discount.name,
                description=discount.description,
                value=self._price_formatter.format_price(discount.value_real, currency.iso_code),
            )
            for discount in summary.discounts
        ]

    def _extract_products(self, summary: PricingSummary) -> list[CartProduct]:
        products = []
        for product in summary.products:
            products.append(
                CartProduct(
                    product_id=int(product.product_id),
                    attribute_id=int(product.attribute_id or 0),
                    customization_id=int(product.customization_id or 0),
                    name=product.name,
                    attribute=product.attributes_small or "",
                    reference=product.reference,
                    unit_price=product.price,
                    quantity=int(product.quantity),
                    price=product.total,
                    image_link=self._image_links.image_link(
                        product.link_rewrite, product.image_id, PRODUCT_IMAGE_SIZE
                    ),
                )
            )
        return products

    def _extract_summary(self, summary: PricingSummary, currency: Currency) -> CartSummary:
        fmt = self._price_formatter.format_price
        iso_code = currency.iso_code

        discount = fmt(summary.total_discounts_tax_exc, iso_code)
        minor_unit = Decimal(1).scaleb(-currency.precision)
        rounded = Decimal(str(summary.total_discounts_tax_exc)).quantize(minor_unit, rounding=ROUND_HALF_UP)
        if rounded != 0:
            discount = "-" + discount

        return CartSummary(
            total_products_price=fmt(summary.total_products, iso_code),
            total_discount=discount,
            total_shipping_price=fmt(summary.total_shipping_tax_exc, iso_code),
            total_taxes=fmt(summary.total_tax, iso_code),
            total_price_with_taxes=fmt(summary.total_price, iso_code),
            total_price_without_taxes=fmt(summary.total_price_without_tax, iso_code),
        )

    def _extract_shipping(
        self, cart: LegacyCart, summary: PricingSummary, log
    ) -> Optional[CartShipping]:
        options_by_address = self._carts.delivery_option_list(cart)
        delivery_address_id = int(cart.address_delivery_id)

        if delivery_address_id not in options_by_address:
            log.debug("no_delivery_options_for_address", address_id=delivery_address_id)
            return None

        carrier = summary.carrier
        return CartShipping(
            total_shipping_price=str(summary.total_shipping),
            is_free_shipping=self._is_free_shipping(cart),
            delivery_options=self._delivery_options(options_by_address, delivery_address_id),
            selected_carrier_id=(int(carrier.id) or None) if carrier is not None else None,
        )

    def _is_free_shipping(self, cart: LegacyCart) -> bool:
        """True when the back-office free-shipping rule for this cart is applied."""
        bo_rule_id = self._cart_rules.id_by_code(f"{BO_ORDER_CODE_PREFIX}{int(cart.id)}")
        if not bo_rule_id:
            return False

        for rule in self._carts.cart_rules(cart, CartRuleFilter.SHIPPING):
            if int(rule.cart_rule_id) == bo_rule_id:
                return True
        return False

    def _delivery_options(
        self, options_by_address: DeliveryOptionList, address_id: int
    ) -> list[CartDeliveryOption]:
        # Multi-address shipping is gone: carriers of every group are shown
        # as one list for the delivery address. Later groups win on duplicates.
        options: dict[int, CartDeliveryOption] = {}
        for group in options_by_address[address_id]:
            for carrier in group.carriers:
                carrier_id = int(carrier.id)
                options[carrier_id] = CartDeliveryOption(
                    carrier_id=carrier_id,
                    carrier_name=carrier.name,
                    carrier_delay=carrier.delay.get(self._context_lang_id, ""),
                )
        return list(options.values())
