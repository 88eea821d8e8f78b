"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from wms.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: str
    name: str
    category: str
    price: str  # exact decimal text, e.g. "15.00"

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(
            id=str(product.id),
            name=product.name,
            category=product.category.name,
            price=str(product.price),
        )


@dataclass(frozen=True)
class CategoryGroupDTO:
    """Output: one category and the products filed under it."""

    category: str
    products: list[ProductDTO]


@dataclass(frozen=True)
class PriceChangeDTO:
    """Output: a drained price change, old snapshot against current state."""

    id: str
    name: str
    category: str
    old_price: str
    new_price: str
