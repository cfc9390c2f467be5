"""Cart ledger: the customer's lines and the subtotal."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterable, Iterator

import structlog

from menu_order.data import CatalogStore
from menu_order.models import CartLine

log = structlog.get_logger(__name__)


class CartLedger:
    """Ordered cart lines, one per product id, in first-added order.

    Every mutation ends in exactly one ``on_change`` call. Mutations made
    inside :meth:`batch` are reported once when the outermost batch exits.
    """

    def __init__(self, catalog: CatalogStore, on_change: Callable[[], None] | None = None) -> None:
        self.catalog = catalog
        self.on_change = on_change
        self._lines: list[CartLine] = []
        self._batch_depth = 0
        self._dirty = False

    @contextmanager
    def batch(self) -> Iterator[None]:
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self._dirty = False
                self._notify()

    def _changed(self) -> None:
        if self._batch_depth:
            self._dirty = True
            return
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _line(self, product_id: int) -> CartLine | None:
        for line in self._lines:
            if line.id == product_id:
                return line
        return None

    def add_item(self, product_id: int, qty: int = 1) -> None:
        if qty < 1:
            raise ValueError("qty must be at least 1")

        line = self._line(product_id)
        if line is not None:
            line.quantity += qty
        else:
            found = self.catalog.find_with_category(product_id)
            if found is None:
                log.warning("cart_add_unknown_product", product_id=product_id)
                return
            item, category = found
            self._lines.append(CartLine(id=item.id, name=item.name, price=item.price, quantity=qty))
            log.info("cart_line_created", product_id=item.id, category=category, price=item.price)

        log.debug("cart_item_added", product_id=product_id, qty=qty)
        self._changed()

    def set_quantity(self, product_id: int, qty: int) -> None:
        if qty < 0:
            raise ValueError("qty must not be negative")
        if qty == 0:
            self.remove_item(product_id)
            return

        line = self._line(product_id)
        if line is None:
            return
        line.quantity = qty
        self._changed()

    def remove_item(self, product_id: int) -> None:
        line = self._line(product_id)
        if line is None:
            return
        self._lines.remove(line)
        log.debug("cart_item_removed", product_id=product_id)
        self._changed()

    def clear(self) -> None:
        if not self._lines:
            return
        self._lines.clear()
        self._changed()

    def restore(self, lines: Iterable[CartLine]) -> None:
        """Replace every line at once with a single notification."""
        merged: dict[int, CartLine] = {}
        for line in lines:
            if line.quantity < 1:
                continue
            if line.id in merged:
                merged[line.id].quantity += line.quantity
            else:
                merged[line.id] = CartLine(id=line.id, name=line.name, price=line.price, quantity=line.quantity)

        with self.batch():
            self._lines = list(merged.values())
            self._dirty = True

    def lines(self) -> list[CartLine]:
        return [CartLine(id=line.id, name=line.name, price=line.price, quantity=line.quantity) for line in self._lines]

    def quantity_of(self, product_id: int) -> int:
        line = self._line(product_id)
        return line.quantity if line is not None else 0

    def subtotal(self) -> int:
        return sum(line.price * line.quantity for line in self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)
