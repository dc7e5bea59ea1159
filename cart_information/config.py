"""Projector settings from the environment."""

import os
from dataclasses import dataclass
from typing import Optional, TextIO

from .address_format import PostalAddressFormatter
from .formatting import LocalePriceFormatter
from .links import ShopImageLinks
from .logging_setup import configure_logging, log_level
from .projector import CartInformationProjector
from .validation import require_positive


@dataclass(frozen=True)
class ProjectorSettings:
    context_lang_id: int = 1
    locale: str = "en-US"
    shop_base_url: str = "http://localhost"
    no_picture_lang: str = "en"
    log_level: str = "INFO"

    def configure_logging(self, file: Optional[TextIO] = None) -> None:
        """Apply ``log_level`` to the structlog configuration."""
        configure_logging(self.log_level, file)

    def build_projector(
        self,
        *,
        carts,
        customers,
        addresses,
        currencies,
        languages,
        cart_rules,
        logger=None,
    ) -> CartInformationProjector:
        """Wire the stores with the bundled formatter, image links and address formatter."""
        return CartInformationProjector(
            carts=carts,
            customers=customers,
            addresses=addresses,
            currencies=currencies,
            languages=languages,
            cart_rules=cart_rules,
            price_formatter=LocalePriceFormatter(self.locale),
            image_links=ShopImageLinks(self.shop_base_url, self.no_picture_lang),
            address_formatter=PostalAddressFormatter(),
            context_lang_id=self.context_lang_id,
            logger=logger,
        )


def load_settings(environ=None) -> ProjectorSettings:
    """Load settings from environment variables.

    Environment variables:
        CART_INFO_CONTEXT_LANG_ID: Language id for carrier delay labels (default: 1)
        CART_INFO_LOCALE: Locale used to format prices (default: en-US)
        CART_INFO_SHOP_BASE_URL: Base URL of product images (default: http://localhost)
        CART_INFO_NO_PICTURE_LANG: Language of the "no picture" image (default: en)
        LOG_LEVEL: Minimum log level (default: INFO)
    """
    env = os.environ if environ is None else environ

    raw_lang_id = env.get("CART_INFO_CONTEXT_LANG_ID", "1")
    try:
        context_lang_id = int(raw_lang_id)
    except ValueError as e:
        raise ValueError(f"CART_INFO_CONTEXT_LANG_ID must be an integer, got {raw_lang_id!r}") from e
    require_positive(context_lang_id, "CART_INFO_CONTEXT_LANG_ID")

    level = env.get("LOG_LEVEL", "INFO").upper()
    log_level(level)

    return ProjectorSettings(
        context_lang_id=context_lang_id,
        locale=env.get("CART_INFO_LOCALE", "en-US"),
        shop_base_url=env.get("CART_INFO_SHOP_BASE_URL", "http://localhost").rstrip("/"),
        no_picture_lang=env.get("CART_INFO_NO_PICTURE_LANG", "en"),
        log_level=level,
    )
