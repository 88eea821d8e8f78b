"""Category value object and its interning cache.

Categories are compared by their normalized name.  Going through a
``CategoryCache`` additionally guarantees that every request for the same
normalized name returns the very same object, so ``is`` comparisons hold.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock

from wms.domain.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def normalize_category_name(name: str) -> str:
    """Upper-case the first character and lower-case the rest.

    The empty string is returned unchanged.
    """
    if not name:
        return name
    return name[0].upper() + name[1:].lower()


@dataclass(frozen=True)
class Category:
    """A case-normalized product grouping label.

    Use ``Category.of()`` (or ``CategoryCache.of()``) rather than the
    constructor; only the factories intern instances.
    """

    name: str

    def get_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    @staticmethod
    def of(name: str) -> Category:
        """Return the interned category for *name* from the default cache."""
        return _default_cache.of(name)


class CategoryCache:
    """Interning cache mapping normalized names to Category instances."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._categories: dict[str, Category] = {}

    def of(self, name: str) -> Category:
        if name is None:
            raise InvalidArgumentError("Category name can't be None")
        if not isinstance(name, str):
            raise InvalidArgumentError(
                f"Category name must be a string, got {type(name).__name__}"
            )

        normalized = normalize_category_name(name)
        with self._lock:
            category = self._categories.get(normalized)
            if category is None:
                category = Category(normalized)
                self._categories[normalized] = category
                logger.debug("Interned category %r", normalized)
            return category

    def clear(self) -> None:
        with self._lock:
            self._categories.clear()

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return normalize_category_name(name) in self._categories

    def __len__(self) -> int:
        with self._lock:
            return len(self._categories)


_default_cache = CategoryCache()


def default_category_cache() -> CategoryCache:
    """Process-wide cache backing ``Category.of``."""
    return _default_cache
