"""Warehouse aggregate and the registry of named warehouses.

A Warehouse owns an insertion-ordered set of products and remembers the
pre-update snapshot of every product whose price changed since the last
call to ``get_changed_products()``.

Invariants:
- product ids are unique within a warehouse
- a failed call never leaves partial changes behind
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from decimal import Decimal
from threading import RLock
from types import MappingProxyType

from wms.domain.exceptions import (
    DuplicateProductError,
    InvalidArgumentError,
    ProductNotFoundError,
)
from wms.domain.model.category import Category
from wms.domain.model.product import Product
from wms.domain.model.value_objects import ZERO_PRICE, validate_price

logger = logging.getLogger(__name__)

DEFAULT_WAREHOUSE_NAME = "DefaultWarehouse"


def _snapshot_key(product: Product) -> tuple:
    return (product.id, product.name, product.category, product.price.as_tuple())


class Warehouse:
    """Aggregate root for a named collection of products.

    Not thread-safe: callers sharing a warehouse across threads must
    serialize access themselves.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._products: dict[uuid.UUID, Product] = {}
        # Ordered set keyed by snapshot; price scale is part of the key.
        self._changed_products: dict[tuple, Product] = {}

    def __repr__(self) -> str:
        return f"Warehouse(name={self.name!r}, products={len(self._products)})"

    def __len__(self) -> int:
        return len(self._products)

    # --- Registry shortcuts ---------------------------------------------------

    @staticmethod
    def get_instance(name: str = DEFAULT_WAREHOUSE_NAME) -> Warehouse:
        """Look up *name* in the process-wide registry."""
        return _default_registry.get_instance(name)

    @staticmethod
    def reset() -> None:
        """Forget every registered warehouse (test isolation)."""
        _default_registry.reset()

    # --- Queries --------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self._products

    def get_products(self) -> tuple[Product, ...]:
        return tuple(self._products.values())

    def get_product_by_id(self, product_id: uuid.UUID) -> Product | None:
        return self._products.get(product_id)

    def get_products_by(self, category: Category) -> tuple[Product, ...]:
        return tuple(p for p in self._products.values() if p.category == category)

    def get_products_grouped_by_categories(
        self,
    ) -> Mapping[Category, tuple[Product, ...]]:
        """Group products by category.

        Groups appear in the order their category was first seen; products
        keep registry order within a group.  The result is read-only.
        """
        groups: dict[Category, list[Product]] = {}
        for product in self._products.values():
            groups.setdefault(product.category, []).append(product)
        return MappingProxyType(
            {category: tuple(products) for category, products in groups.items()}
        )

    # --- Commands -------------------------------------------------------------

    def add_product(
        self,
        product_id: uuid.UUID | None,
        name: str,
        category: Category,
        price: Decimal | None = None,
    ) -> Product:
        """Register a new product and return it.

        A missing id gets a random UUID; a missing price becomes zero.
        Use ``update_product_price()`` to change an existing product.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Product name can't be None or empty")
        if not isinstance(category, Category):
            raise InvalidArgumentError(
                f"Category must be a Category, got {type(category).__name__}"
            )

        if product_id is None:
            product_id = uuid.uuid4()
        price = ZERO_PRICE if price is None else validate_price(price)

        if product_id in self._products:
            raise DuplicateProductError(
                f"Product with id {product_id} already exists, "
                "use update_product_price for updates"
            )

        product = Product(id=product_id, name=name, category=category, price=price)
        self._products[product_id] = product
        logger.debug("Added %s to warehouse %r", product, self.name)
        return product

    def update_product_price(self, product_id: uuid.UUID, new_price: Decimal) -> None:
        """Change a product's price, recording its previous state.

        Setting the exact current price is a no-op.
        """
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product with id {product_id} doesn't exist")
        new_price = validate_price(new_price)

        if product.has_price(new_price):
            return

        self._changed_products.setdefault(_snapshot_key(product), product)
        self._products[product_id] = product.with_price(new_price)
        logger.debug(
            "Price of %s in warehouse %r changed from %s to %s",
            product_id, self.name, product.price, new_price,
        )

    def has_pending_changes(self) -> bool:
        return bool(self._changed_products)

    def get_changed_products(self) -> tuple[Product, ...]:
        """Return pending pre-update snapshots and clear them."""
        changed = tuple(self._changed_products.values())
        self._changed_products.clear()
        if changed:
            logger.debug(
                "Drained %d changed product(s) from warehouse %r",
                len(changed), self.name,
            )
        return changed


class WarehouseRegistry:
    """One Warehouse per distinct name.

    The empty name is special: every request for ``""`` builds a new,
    unregistered warehouse.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._instances: dict[str, Warehouse] = {}

    def get_instance(self, name: str = DEFAULT_WAREHOUSE_NAME) -> Warehouse:
        if name is None:
            raise InvalidArgumentError("Warehouse name can't be None")
        if name == "":
            return Warehouse(name)

        with self._lock:
            warehouse = self._instances.get(name)
            if warehouse is None:
                warehouse = Warehouse(name)
                self._instances[name] = warehouse
                logger.info("Created warehouse %r", name)
            return warehouse

    def reset(self) -> None:
        with self._lock:
            self._instances.clear()

    def names(self) -> list[str]:
        with self._lock:
            return list(self._instances)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)


_default_registry = WarehouseRegistry()


def default_warehouse_registry() -> WarehouseRegistry:
    """Process-wide registry backing ``Warehouse.get_instance``."""
    return _default_registry
