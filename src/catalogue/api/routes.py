"""FastAPI endpoints for the Catalogue domain.

Read-only: products can be listed and fetched, never changed over HTTP.
"""

from fastapi import APIRouter, Depends

from catalogue.api.schemas import ProductListResponse, ProductResponse
from shared.exceptions import ProductNotFoundError
from storefront import Storefront, get_storefront

product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=ProductListResponse)
async def list_products(storefront: Storefront = Depends(get_storefront)) -> ProductListResponse:
    products = storefront.catalogue.list_products()
    return ProductListResponse(data=[ProductResponse.from_product(p) for p in products])


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, storefront: Storefront = Depends(get_storefront)) -> ProductResponse:
    # Non-numeric ids cannot match a product, so they are a 404, not a 400.
    try:
        identifier = int(product_id)
    except ValueError:
        raise ProductNotFoundError(product_id) from None

    product = storefront.catalogue.get_product(identifier)
    return ProductResponse.from_product(product)
