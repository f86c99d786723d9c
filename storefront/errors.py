# storefront/errors.py
from __future__ import annotations
from typing import Optional


class StoreError(ValueError):
    """Base class for every inventory and shopping failure."""

    message = "store error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


# Inventory
class InvalidItemNameOrID(StoreError):
    message = "Item name or id is empty"


class DuplicateItem(StoreError):
    message = "Item ID already exists with the same name"


class ItemDoesNotExist(StoreError):
    message = "Item does not exist"


class InvalidQuantity(StoreError):
    message = "Quantity is invalid"


class InsufficientStock(StoreError):
    def __init__(self, available: int) -> None:
        self.available = available
        super().__init__(f"inventory only has {available}")


# Shopping
class EmptyCart(StoreError):
    message = "No items in shopping cart"


class ItemNotFound(StoreError):
    message = "stock does not exist"


class QuantityInsufficient(StoreError):
    message = "quantity is not sufficient"
