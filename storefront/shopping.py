from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from . import rules
from .catalog import Item, Order, latest_items
from .config import Settings
from .errors import EmptyCart, InsufficientStock, InvalidQuantity, ItemNotFound, QuantityInsufficient
from .inventory import Inventory
from .logger import get_logger
from .tools.report_tool import format_cart, format_order

logger = get_logger(__name__)


@dataclass
class ShoppingCart:
    items: List[Item] = field(default_factory=list)
    total_price: int = 0
    quantities: Dict[str, int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def item_ids(self) -> List[str]:
        """Distinct ids in the order they were first added."""
        return list(latest_items(self.items))

    def add(self, item: Item, quantity: int) -> None:
        # last request for an id wins, priced at the item it was made for
        self.items.append(item)
        self.quantities[item.id] = quantity
        self.total_price = sum(it.price * self.quantities[i] for i, it in latest_items(self.items).items())

    def clear(self) -> None:
        self.items.clear()
        self.quantities.clear()
        self.total_price = 0


class Shopping:
    """Binds a cart to an inventory; stock only moves at checkout."""

    def __init__(
        self,
        inventory: Inventory,
        cart: Optional[ShoppingCart] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.inventory = inventory
        self.cart = cart if cart is not None else ShoppingCart()
        self.settings = settings or inventory.settings
        self._rng = rng or random.Random()

    def add_to_cart(self, item_id: str, quantity: int) -> None:
        if not rules.is_positive_quantity(quantity):
            raise InvalidQuantity()
        if item_id not in self.inventory:
            raise ItemNotFound()

        stock = self.inventory.get(item_id)
        if not rules.has_enough(stock.quantity, quantity):
            raise QuantityInsufficient()

        self.cart.add(stock.item, quantity)
        logger.debug("Cart: %s x%d, total=%d", item_id, quantity, self.cart.total_price)

    def print_cart(self) -> None:
        print(format_cart(self.cart.items, item_width=self.settings.item_width))

    def new_order_id(self) -> str:
        alphabet = self.settings.order_id_alphabet
        return "".join(self._rng.choice(alphabet) for _ in range(self.settings.order_id_length))

    def checkout(self) -> Order:
        if self.cart.is_empty:
            raise EmptyCart()

        item_ids = self.cart.item_ids()

        # Validate stock before applying mutation.
        for item_id in item_ids:
            on_hand = self.inventory.get(item_id).quantity
            if not rules.has_enough(on_hand, self.cart.quantities[item_id]):
                raise InsufficientStock(on_hand)

        order = Order(
            order_id=self.new_order_id(),
            date_purchased=datetime.now(timezone.utc),
            items=list(self.cart.items),
            quantities=dict(self.cart.quantities),
            total_price=self.cart.total_price,
        )
        print(format_order(order, item_width=self.settings.item_width))

        for item_id in item_ids:
            self.inventory.decrease(item_id, order.quantities[item_id])

        self.cart.clear()
        logger.info("Checked out order %s (%d item(s), total=%d)", order.order_id, len(item_ids), order.total_price)
        return order
