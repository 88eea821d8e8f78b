"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from wms.application.dto import ProductDTO
from wms.domain.model.category import CategoryCache
from wms.domain.model.value_objects import parse_price, parse_product_id
from wms.domain.model.warehouse import Warehouse


class AddProductHandler:

    def __init__(self, warehouse: Warehouse, categories: CategoryCache) -> None:
        self._warehouse = warehouse
        self._categories = categories

    def handle(
        self,
        name: str,
        category: str,
        price: str | Decimal | None = None,
        product_id: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the warehouse.

        Raw strings are coerced here; every rule about names, ids and
        prices is enforced by the Warehouse itself.
        """
        product = self._warehouse.add_product(
            parse_product_id(product_id) if product_id is not None else None,
            name,
            self._categories.of(category),
            parse_price(price) if price is not None else None,
        )
        return ProductDTO.from_product(product)
