"""Application service: Update Product Price use case."""

from __future__ import annotations

from decimal import Decimal

from wms.application.dto import ProductDTO
from wms.domain.exceptions import ProductNotFoundError
from wms.domain.model.value_objects import parse_price, parse_product_id
from wms.domain.model.warehouse import Warehouse


class UpdateProductPriceHandler:

    def __init__(self, warehouse: Warehouse) -> None:
        self._warehouse = warehouse

    def handle(self, product_id: str, new_price: str | Decimal) -> ProductDTO:
        """Update a product's price.

        The previous record is kept by the warehouse until the next drain,
        see ``DrainChangesHandler``.
        """
        uid = parse_product_id(product_id)
        self._warehouse.update_product_price(uid, parse_price(new_price))
        product = self._warehouse.get_product_by_id(uid)
        if product is None:
            raise ProductNotFoundError(f"Product with id {uid} doesn't exist")
        return ProductDTO.from_product(product)
