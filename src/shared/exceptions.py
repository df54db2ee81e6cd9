"""Storefront error taxonomy.

Every error carries the message sent to the client and the HTTP status it
maps to. Handlers in ``shared.error_handlers`` render them as
``{"error": message}``.
"""


class StorefrontError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    default_message = "Error interno del servidor"

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        payload = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidRequestError(StorefrontError):
    status_code = 400
    default_message = "Solicitud inválida"


class EmptyCartError(InvalidRequestError):
    """Checkout was called without any cart items."""

    default_message = "Carrito vacío"


class NotFoundError(StorefrontError):
    status_code = 404
    default_message = "Recurso no encontrado"


class ProductNotFoundError(NotFoundError):
    default_message = "Producto no encontrado"

    def __init__(self, product_id, message=None):
        self.product_id = product_id
        super().__init__(message)


class InsufficientStockError(StorefrontError):
    """A stock decrement would take a product below zero."""

    status_code = 409
    default_message = "Stock insuficiente"

    def __init__(self, product_id, requested, available):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            details={"productId": product_id, "requested": requested, "available": available},
        )
