"""In-memory catalogue store."""

from collections.abc import Iterable

from catalogue.product.product import Product
from shared.exceptions import ProductNotFoundError


class CatalogueStore:
    """Ordered, process-lifetime collection of products.

    Products keep their seed order. There is no way to add or remove a
    product once the store is built.
    """

    def __init__(self, products: Iterable[Product] = ()):
        self._products: list[Product] = []
        self._by_id: dict[int, Product] = {}
        for product in products:
            if product.id in self._by_id:
                raise ValueError(f"Duplicate product id {product.id} in catalogue seed")
            self._products.append(product)
            self._by_id[product.id] = product

    def __len__(self):
        return len(self._products)

    def list_products(self) -> list[Product]:
        return list(self._products)

    def find_product(self, product_id: int) -> Product | None:
        return self._by_id.get(product_id)

    def get_product(self, product_id: int) -> Product:
        product = self.find_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
