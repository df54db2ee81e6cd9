"""Pydantic response schemas for the Catalogue API.

These are external contracts, kept separate from the internal Product
record.
"""

from pydantic import BaseModel

from catalogue.product.product import Product


class ProductResponse(BaseModel):
    id: int
    name: str
    price: int
    image: str
    description: str
    stock: int

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(**product.model_dump())


class ProductListResponse(BaseModel):
    data: list[ProductResponse]
