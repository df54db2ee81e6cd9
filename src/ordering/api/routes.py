"""FastAPI routes for the Ordering domain: cart checkout and orders."""

from fastapi import APIRouter, Depends

from ordering.api.schemas import CartItemRequest, CheckoutRequest, CheckoutResponse, OrderResponse
from ordering.checkout.checkout import CartLine
from storefront import Storefront, get_storefront

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("/checkout", response_model=CheckoutResponse)
async def checkout(
    body: CheckoutRequest | None = None,
    storefront: Storefront = Depends(get_storefront),
) -> CheckoutResponse:
    """Place an order for every cart line that can be fulfilled.

    Malformed lines, unknown products and lines with too little stock are
    left out of the order and reported as rejected in ``lines``; the call
    still succeeds.
    """
    items = body.items if body is not None else None
    lines = [_cart_line(item) for item in items or ()]
    result = storefront.checkout.checkout(lines)
    return CheckoutResponse.from_result(result)


def _cart_line(item) -> CartLine:
    if isinstance(item, CartItemRequest):
        return CartLine(product_id=item.id, quantity=item.quantity)
    return CartLine()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(storefront: Storefront = Depends(get_storefront)) -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in storefront.orders.list_orders()]
