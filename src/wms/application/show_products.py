"""Application service: product queries."""

from __future__ import annotations

from wms.application.dto import CategoryGroupDTO, ProductDTO
from wms.domain.model.category import CategoryCache
from wms.domain.model.value_objects import parse_product_id
from wms.domain.model.warehouse import Warehouse


class ShowProductsHandler:

    def __init__(self, warehouse: Warehouse, categories: CategoryCache) -> None:
        self._warehouse = warehouse
        self._categories = categories

    def list_all(self) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in self._warehouse.get_products()]

    def by_id(self, product_id: str) -> ProductDTO | None:
        product = self._warehouse.get_product_by_id(parse_product_id(product_id))
        if product is None:
            return None
        return ProductDTO.from_product(product)

    def by_category(self, category: str) -> list[ProductDTO]:
        products = self._warehouse.get_products_by(self._categories.of(category))
        return [ProductDTO.from_product(p) for p in products]

    def grouped(self) -> list[CategoryGroupDTO]:
        """Products grouped by category, in first-seen category order."""
        groups = self._warehouse.get_products_grouped_by_categories()
        return [
            CategoryGroupDTO(
                category=category.name,
                products=[ProductDTO.from_product(p) for p in products],
            )
            for category, products in groups.items()
        ]
