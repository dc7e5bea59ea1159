"""Cart information read model for legacy e-commerce carts."""

from .errors import (
    CartInformationError,
    CartConstraintError,
    CartNotFoundError,
    LocalizationError,
    StoreError,
)
from .legacy import (
    BO_ORDER_CODE_PREFIX,
    Address,
    AppliedCartRule,
    AssignedCarrier,
    Carrier,
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
from .results import (
    CartAddress,
    CartDeliveryOption,
    CartInformation,
    CartProduct,
    CartRule,
    CartShipping,
    CartSummary,
)
from .query import GetCartInformation
from .projector import CartInformationProjector, PRODUCT_IMAGE_SIZE
from .formatting import LocalePriceFormatter
from .links import ShopImageLinks
from .address_format import PostalAddressFormatter
from .config import ProjectorSettings, load_settings
from .logging_setup import configure_logging

__version__ = "0.1.0"
