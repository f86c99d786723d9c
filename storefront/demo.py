from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .catalog import Category, Item
from .config import Settings
from .errors import StoreError
from .inventory import Inventory
from .logger import get_logger
from .shopping import Shopping

logger = get_logger(__name__)

PENCIL = Item(id="9798798", name="Pencil", price=20000, category=Category.SCHOOL_SUPPLIES)
RULER = Item(id="9798799", name="Ruler", price=20000, category=Category.SCHOOL_SUPPLIES)
PEN = Item(id="9800000", name="Pen", price=10000, category=Category.SCHOOL_SUPPLIES)
BLANK = Item(id="", name="", price=0, category=Category.BEAUTY_COSMETICS)
HAMMER = Item(id="9798798", name="Hammer", price=20000, category=Category.SCHOOL_SUPPLIES)

CATALOG = (PENCIL, RULER, PEN, BLANK, HAMMER)


def attempt(label: str, fn: Callable[..., object], *args: object) -> bool:
    """Run one demo step, reporting a StoreError instead of stopping."""
    try:
        fn(*args)
    except StoreError as exc:
        print(f"error: {exc}")
        logger.info("%s failed: %s (%s)", label, exc, exc.kind)
        return False
    return True


def run_demo(settings: Optional[Settings] = None, shopping: Optional[Shopping] = None) -> Tuple[Inventory, Shopping, List[bool]]:
    inventory = shopping.inventory if shopping else Inventory(settings=settings)
    shop = shopping or Shopping(inventory, settings=settings)
    results: List[bool] = []

    def step(label: str, fn: Callable[..., object], *args: object) -> None:
        results.append(attempt(label, fn, *args))

    print(inventory)
    step("add pencil", inventory.add_new, PENCIL, 1)
    step("add pen", inventory.add_new, PEN, 1)
    step("add blank item", inventory.add_new, BLANK, 0)
    step("add pencil again", inventory.add_new, PENCIL, 1)
    print(inventory)

    step("increase pencil", inventory.increase, PENCIL.id, 1)
    step("decrease pencil", inventory.decrease, PENCIL.id, 1)
    step("decrease pencil past stock", inventory.decrease, PENCIL.id, 3)
    print(inventory)

    inventory.print_category(Category.SCHOOL_SUPPLIES)
    step("increase missing ruler", inventory.increase, RULER.id, 1)
    step("increase pencil by negative", inventory.increase, PENCIL.id, -1)

    step("cart 2 pencils", shop.add_to_cart, PENCIL.id, 2)
    step("cart 1 pen", shop.add_to_cart, PEN.id, 1)
    print(shop.cart.total_price)
    shop.print_cart()

    step("checkout", shop.checkout)
    print(inventory)
    step("checkout empty cart", shop.checkout)

    # same id, different name: replaces the pencil entry
    step("add hammer", inventory.add_new, HAMMER, 2)
    print(inventory)
    return inventory, shop, results
