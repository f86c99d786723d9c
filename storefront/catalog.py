from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List


class Category(str, Enum):
    HOME_FURNISHING = "HomeFurnishing"
    BEAUTY_COSMETICS = "BeautyCosmetics"
    SCHOOL_SUPPLIES = "SchoolSupplies"


@dataclass(frozen=True)
class Item:
    """Represents a catalog entry. Prices are whole currency units."""

    id: str
    name: str
    price: int
    category: Category

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("price cannot be negative")


@dataclass(frozen=True)
class Stock:
    item: Item
    quantity: int


@dataclass(frozen=True)
class Order:
    order_id: str
    date_purchased: datetime
    items: List[Item]
    quantities: Dict[str, int] = field(default_factory=dict)
    total_price: int = 0


def latest_items(items: Iterable[Item]) -> Dict[str, Item]:
    """Map each id to the last Item added under it, keeping first-seen order."""
    out: Dict[str, Item] = {}
    for item in items:
        out[item.id] = item
    return out
