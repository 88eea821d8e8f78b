"""Unit tests for Category and its interning cache."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from wms.domain.exceptions import InvalidArgumentError
from wms.domain.model.category import (
    Category,
    CategoryCache,
    default_category_cache,
    normalize_category_name,
)


class TestNormalizeCategoryName:

    def test_capitalizes_first_letter_and_lowers_rest(self):
        assert normalize_category_name("tOOLS") == "Tools"

    def test_single_character(self):
        assert normalize_category_name("x") == "X"

    def test_empty_string_unchanged(self):
        assert normalize_category_name("") == ""

    def test_leading_space_kept(self):
        assert normalize_category_name(" Garden") == " garden"


class TestCategoryCache:

    def test_case_variants_share_one_instance(self):
        cache = CategoryCache()
        a = cache.of("tools")
        b = cache.of("Tools")
        c = cache.of("TOOLS")
        assert a is b is c
        assert a.name == "Tools"

    def test_distinct_names_distinct_instances(self):
        cache = CategoryCache()
        assert cache.of("tools") is not cache.of("toys")

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError, match="can't be None"):
            CategoryCache().of(None)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidArgumentError, match="must be a string"):
            CategoryCache().of(42)

    def test_empty_name_is_interned(self):
        cache = CategoryCache()
        assert cache.of("") is cache.of("")
        assert cache.of("").name == ""

    def test_contains_and_len(self):
        cache = CategoryCache()
        cache.of("tools")
        cache.of("TOOLS")
        cache.of("toys")
        assert len(cache) == 2
        assert "tOoLs" in cache
        assert "garden" not in cache

    def test_clear_forgets_instances(self):
        cache = CategoryCache()
        before = cache.of("tools")
        cache.clear()
        after = cache.of("tools")
        assert before is not after
        assert before == after

    def test_separate_caches_are_independent(self):
        assert CategoryCache().of("tools") is not CategoryCache().of("tools")


class TestCategory:

    def test_of_uses_default_cache(self):
        assert Category.of("furniture") is Category.of("FURNITURE")
        assert "furniture" in default_category_cache()

    def test_of_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Category.of(None)

    def test_get_name(self):
        assert Category.of("electronics").get_name() == "Electronics"

    def test_equality_and_hash_by_name(self):
        a = Category("Tools")
        b = Category("Tools")
        assert a == b
        assert hash(a) == hash(b)
        assert a != Category("Toys")

    def test_str(self):
        assert str(Category.of("books")) == "Books"


class TestCategoryCacheConcurrency:

    def test_threads_share_one_instance(self):
        cache = CategoryCache()
        names = ["tools", "Tools", "TOOLS", "tOOLS"] * 50
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(cache.of, names))
        assert len({id(c) for c in results}) == 1
        assert len(cache) == 1
