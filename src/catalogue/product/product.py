"""Product record held by the catalogue store."""

from pydantic import BaseModel, ConfigDict, Field

from shared.exceptions import InsufficientStockError, InvalidRequestError


class Product(BaseModel):
    """A product for sale.

    Products are seeded when the process starts and never created or deleted
    afterwards. Stock is the only field that changes, and only through
    ``decrement_stock`` during checkout.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int
    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    image: str = ""
    description: str = ""
    stock: int = Field(default=0, ge=0)

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

    def decrement_stock(self, quantity: int) -> None:
        if quantity < 1:
            raise InvalidRequestError(details={"quantity": ["Quantity must be at least 1"]})
        if not self.has_stock_for(quantity):
            raise InsufficientStockError(self.id, requested=quantity, available=self.stock)
        self.stock -= quantity
