"""Unit tests for the WarehouseRegistry."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from wms.domain.exceptions import InvalidArgumentError
from wms.domain.model.category import CategoryCache
from wms.domain.model.warehouse import WarehouseRegistry

TOOLS = CategoryCache().of("tools")


class TestWarehouseRegistry:

    def test_same_name_same_instance(self):
        registry = WarehouseRegistry()
        assert registry.get_instance("X") is registry.get_instance("X")

    def test_different_names_different_instances(self):
        registry = WarehouseRegistry()
        assert registry.get_instance("X") is not registry.get_instance("Y")

    def test_default_name(self):
        registry = WarehouseRegistry()
        wh = registry.get_instance()
        assert wh.name == "DefaultWarehouse"
        assert registry.get_instance("DefaultWarehouse") is wh

    def test_empty_name_always_fresh(self):
        registry = WarehouseRegistry()
        a = registry.get_instance("")
        b = registry.get_instance("")
        assert a is not b
        assert a != b
        a.add_product(None, "Hammer", TOOLS)
        assert b.is_empty()

    def test_empty_name_not_registered(self):
        registry = WarehouseRegistry()
        registry.get_instance("")
        assert len(registry) == 0
        assert "" not in registry

    def test_none_name_rejected(self):
        with pytest.raises(InvalidArgumentError):
            WarehouseRegistry().get_instance(None)

    def test_names_in_creation_order(self):
        registry = WarehouseRegistry()
        registry.get_instance("B")
        registry.get_instance("A")
        registry.get_instance("B")
        assert registry.names() == ["B", "A"]

    def test_reset_clears_registry_but_not_held_references(self):
        registry = WarehouseRegistry()
        old = registry.get_instance("X")
        old.add_product(None, "Hammer", TOOLS)

        registry.reset()

        assert len(registry) == 0
        new = registry.get_instance("X")
        assert new is not old
        assert new.is_empty()
        assert not old.is_empty()

    def test_registries_are_independent(self):
        assert WarehouseRegistry().get_instance("X") is not WarehouseRegistry().get_instance("X")


class TestWarehouseRegistryConcurrency:

    def test_threads_share_one_instance(self):
        registry = WarehouseRegistry()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(registry.get_instance, ["X"] * 200))
        assert len({id(w) for w in results}) == 1
        assert registry.names() == ["X"]


class TestWarehouseRegistryLogging:

    def test_creation_logged_once_at_info(self, caplog):
        caplog.set_level(logging.INFO, logger="wms.domain.model.warehouse")
        registry = WarehouseRegistry()
        registry.get_instance("North")
        registry.get_instance("North")
        created = [
            r for r in caplog.records
            if r.levelno == logging.INFO and "Created warehouse" in r.getMessage()
        ]
        assert len(created) == 1
        assert "'North'" in created[0].getMessage()

    def test_empty_name_not_logged(self, caplog):
        caplog.set_level(logging.INFO, logger="wms.domain.model.warehouse")
        WarehouseRegistry().get_instance("")
        assert not [r for r in caplog.records if "Created warehouse" in r.getMessage()]
