"""Product value.

Products are immutable records.  A price change never mutates a product:
the warehouse swaps in the record returned by ``with_price()`` so that
snapshots handed out earlier keep the values they were taken with.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from decimal import Decimal

from wms.domain.model.category import Category
from wms.domain.model.value_objects import ZERO_PRICE


@dataclass(frozen=True)
class Product:
    """A categorized, priced item registered in a warehouse."""

    id: uuid.UUID
    name: str
    category: Category
    price: Decimal = ZERO_PRICE

    def with_price(self, new_price: Decimal) -> Product:
        return replace(self, price=new_price)

    def has_price(self, price: Decimal) -> bool:
        """True if *price* is exactly the current price, scale included.

        ``Decimal("1.0")`` and ``Decimal("1.00")`` are different prices here.
        """
        return self.price.compare_total(price) == 0
