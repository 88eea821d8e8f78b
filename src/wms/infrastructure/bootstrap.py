"""Composition root — wires the registries the rest of the code depends on.

This is the only place in the codebase that knows about *all* layers.
Handlers and CLI commands receive their warehouse and category cache
from here instead of reaching for module globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from wms.domain.model.category import CategoryCache, default_category_cache
from wms.domain.model.warehouse import (
    DEFAULT_WAREHOUSE_NAME,
    Warehouse,
    WarehouseRegistry,
    default_warehouse_registry,
)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass
class AppContext:
    """The registries one application instance works against."""

    categories: CategoryCache = field(default_factory=CategoryCache)
    warehouses: WarehouseRegistry = field(default_factory=WarehouseRegistry)

    def session(self, warehouse_name: str = DEFAULT_WAREHOUSE_NAME) -> LedgerSession:
        return LedgerSession(
            warehouse=self.warehouses.get_instance(warehouse_name),
            categories=self.categories,
        )


@dataclass
class LedgerSession:
    """A single warehouse plus the category cache used to resolve names."""

    warehouse: Warehouse
    categories: CategoryCache


def category_cache() -> CategoryCache:
    return default_category_cache()


def warehouse_registry() -> WarehouseRegistry:
    return default_warehouse_registry()


def default_context() -> AppContext:
    """Context backed by the process-wide registries."""
    return AppContext(categories=category_cache(), warehouses=warehouse_registry())


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("wms").setLevel(level)
