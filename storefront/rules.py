# storefront/rules.py
from __future__ import annotations

from .catalog import Item


def is_blank_item(item: Item) -> bool:
    return item.id == "" and item.name == ""


def is_positive_quantity(quantity: int) -> bool:
    return quantity > 0


def is_valid_opening_quantity(quantity: int) -> bool:
    # a new stock entry may start empty
    return quantity >= 0


def has_enough(on_hand: int, requested: int) -> bool:
    return on_hand >= requested
