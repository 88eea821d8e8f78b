"""Application service: Drain Changes use case.

Turns the warehouse's pending price-change snapshots into change events.
Each snapshot is delivered once; a second drain returns nothing until
another price changes.
"""

from __future__ import annotations

from wms.application.dto import PriceChangeDTO
from wms.domain.exceptions import ProductNotFoundError
from wms.domain.model.warehouse import Warehouse


class DrainChangesHandler:

    def __init__(self, warehouse: Warehouse) -> None:
        self._warehouse = warehouse

    def handle(self) -> list[PriceChangeDTO]:
        events: list[PriceChangeDTO] = []
        for snapshot in self._warehouse.get_changed_products():
            current = self._warehouse.get_product_by_id(snapshot.id)
            if current is None:
                raise ProductNotFoundError(
                    f"Product with id {snapshot.id} doesn't exist"
                )
            events.append(
                PriceChangeDTO(
                    id=str(snapshot.id),
                    name=snapshot.name,
                    category=snapshot.category.name,
                    old_price=str(snapshot.price),
                    new_price=str(current.price),
                )
            )
        return events
