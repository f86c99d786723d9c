# storefront/tools/report_tool.py
from __future__ import annotations
from typing import Iterable, List

from ..catalog import Category, Item, Order, Stock, latest_items

def _header(*cols: tuple) -> List[str]:
    head = "".join(label.ljust(width) for label, width in cols)
    return [head, "-" * len(head)]

def format_category_table(category: Category, stocks: Iterable[Stock],
                          category_width: int = 20, item_width: int = 20) -> str:
    lines = _header(("Category", category_width), ("Item(s)", item_width))
    for s in stocks:
        lines.append(category.value.ljust(category_width) + s.item.name.ljust(item_width))
    return "\n".join(lines)

def format_cart(items: Iterable[Item], item_width: int = 20) -> str:
    lines = _header(("Shopping Cart", item_width))
    for it in items:
        lines.append(it.name.ljust(item_width) + str(it.price))
    return "\n".join(lines)

def format_order(order: Order, item_width: int = 20) -> str:
    when = order.date_purchased.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    lines = [f"Order {order.order_id}", f"Purchased: {when}"]
    lines += _header(("Item", item_width), ("Qty", 6), ("Price", 10))
    # one row per distinct id, the cart may list an item twice
    for it in latest_items(order.items).values():
        qty = order.quantities.get(it.id, 0)
        lines.append(it.name.ljust(item_width) + str(qty).ljust(6) + str(it.price))
    lines.append(f"Total: {order.total_price}")
    return "\n".join(lines)
