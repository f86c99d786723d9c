from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterator, List, Optional

from . import rules
from .catalog import Category, Item, Stock
from .config import Settings
from .errors import DuplicateItem, InsufficientStock, InvalidItemNameOrID, InvalidQuantity, ItemDoesNotExist
from .logger import get_logger
from .tools.report_tool import format_category_table

logger = get_logger(__name__)


class Inventory:
    """In-memory stock keyed by item id.

    Every mutation replaces the Stock stored under the id, so a Stock handed
    out by ``get`` never changes underneath the caller.
    """

    def __init__(self, stock: Optional[Dict[str, Stock]] = None, settings: Optional[Settings] = None) -> None:
        self._stock: Dict[str, Stock] = {}
        self.settings = settings or Settings()
        for item_id, entry in (stock or {}).items():
            if item_id != entry.item.id:
                raise ValueError(f"stock key '{item_id}' does not match item id '{entry.item.id}'")
            self._stock[item_id] = entry

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._stock

    def __len__(self) -> int:
        return len(self._stock)

    def __iter__(self) -> Iterator[Stock]:
        return iter(list(self._stock.values()))

    def __str__(self) -> str:
        return f"stock: {self._stock}"

    def get(self, item_id: str) -> Stock:
        try:
            return self._stock[item_id]
        except KeyError as exc:
            raise ItemDoesNotExist() from exc

    def list_by_category(self, category: Category) -> List[Stock]:
        return [s for s in self._stock.values() if s.item.category == category]

    def print_category(self, category: Category) -> None:
        print(format_category_table(
            category,
            self.list_by_category(category),
            category_width=self.settings.category_width,
            item_width=self.settings.item_width,
        ))

    def add_new(self, item: Item, quantity: int) -> None:
        if rules.is_blank_item(item):
            raise InvalidItemNameOrID()
        if not rules.is_valid_opening_quantity(quantity):
            raise InvalidQuantity()

        existing = self._stock.get(item.id)
        if existing is not None and existing.item.name == item.name:
            raise DuplicateItem()
        if existing is not None:
            logger.warning("Replacing '%s' with '%s' under id %s", existing.item.name, item.name, item.id)

        self._stock[item.id] = Stock(item=item, quantity=quantity)
        logger.debug("Added %s (%s) qty=%d", item.id, item.name, quantity)

    def increase(self, item_id: str, quantity: int) -> None:
        current = self.get(item_id)
        if not rules.is_positive_quantity(quantity):
            raise InvalidQuantity()

        self._stock[item_id] = replace(current, quantity=current.quantity + quantity)
        logger.debug("Increased %s by %d to %d", item_id, quantity, current.quantity + quantity)

    def decrease(self, item_id: str, quantity: int) -> None:
        current = self.get(item_id)
        if not rules.is_positive_quantity(quantity):
            raise InvalidQuantity()
        if not rules.has_enough(current.quantity, quantity):
            raise InsufficientStock(current.quantity)

        self._stock[item_id] = replace(current, quantity=current.quantity - quantity)
        logger.debug("Decreased %s by %d to %d", item_id, quantity, current.quantity - quantity)
