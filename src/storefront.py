"""Storefront composition root.

One Storefront owns the catalogue, the order log and the checkout processor
for the lifetime of the application. Request handlers reach it through the
``get_storefront`` dependency; nothing else holds module-level state.
"""

from collections.abc import Iterable

from fastapi import Request

from catalogue.product.product import Product
from catalogue.product.seed import load_products, seed_products
from catalogue.store import CatalogueStore
from ordering.checkout.checkout import CheckoutProcessor
from ordering.order.log import OrderLog
from settings import Settings
from shared.logging import get_logger

logger = get_logger(__name__)


class Storefront:
    def __init__(self, catalogue: CatalogueStore, orders: OrderLog | None = None):
        self.catalogue = catalogue
        self.orders = orders if orders is not None else OrderLog()
        self.checkout = CheckoutProcessor(self.catalogue, self.orders)

    @classmethod
    def seeded(cls, products: Iterable[Product] | None = None) -> "Storefront":
        """Storefront over the given products, or the built-in catalogue."""
        return cls(CatalogueStore(seed_products() if products is None else products))

    @classmethod
    def from_settings(cls, settings: Settings) -> "Storefront":
        if settings.seed_file is not None:
            products = load_products(settings.seed_file)
            logger.info("catalogue.seeded", source=str(settings.seed_file), products=len(products))
        else:
            products = seed_products()
            logger.info("catalogue.seeded", source="builtin", products=len(products))
        return cls.seeded(products)


def get_storefront(request: Request) -> Storefront:
    return request.app.state.storefront
