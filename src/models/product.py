"""Product payloads exchanged with the inventory API."""
from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import LOW_STOCK_THRESHOLD

ProductId = Union[int, str]


class StockStatus(str, Enum):
    """Stock level derived from a product's quantity (never stored)."""

    OUT_OF_STOCK = "out"
    LOW_STOCK = "low"
    IN_STOCK = "high"


def stock_status(quantity: int) -> StockStatus:
    """Classify *quantity* as out of stock (0), low (1-10) or in stock (>10)."""
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class Product(BaseModel):
    """A product record as returned by the backend."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: ProductId
    name: str
    description: str = ""
    quantity: int = Field(..., ge=0)

    @field_validator("description", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @property
    def status(self) -> StockStatus:
        return stock_status(self.quantity)


class ProductDraft(BaseModel):
    """Editable form data for the add/edit product dialog."""

    name: str = ""
    description: str = ""
    quantity: int = 0

    @classmethod
    def from_product(cls, product: Product) -> "ProductDraft":
        return cls(
            name=product.name,
            description=product.description,
            quantity=product.quantity,
        )

    def validation_errors(self) -> list[str]:
        """Return human-readable problems that block saving (empty if valid)."""
        errors: list[str] = []
        if not self.name.strip():
            errors.append("Product name is required.")
        if self.quantity < 0:
            errors.append("Quantity cannot be negative.")
        return errors

    def to_payload(self) -> dict:
        """Body for POST / PUT requests."""
        return {
            "name": self.name.strip(),
            "description": self.description,
            "quantity": self.quantity,
        }
