"""Unit tests for rule matching (action, target, properties, attributes)."""

import asyncio

import pytest

from cancan.pdp import Rule
from cancan.pdp.matcher import (
    action_matches,
    attrs_match,
    deep_equals,
    get_property,
    matches_attributes,
    target_matches,
)


# ============================================================================
# Example classes
# ============================================================================


class User:
    pass


class Product:
    """Record-style object exposing properties through get()."""

    def __init__(self, attrs=None):
        self.attrs = attrs or {}

    def get(self, key):
        return self.attrs.get(key)


class SpecialProduct(Product):
    pass


class Article:
    """Plain field container."""

    def __init__(self, **fields):
        for name, value in fields.items():
            setattr(self, name, value)


class Settings:
    """Has a non-callable 'get' field, so it is read as a plain object."""

    def __init__(self):
        self.get = "not a method"
        self.theme = "dark"


# ============================================================================
# Tests: action_matches / target_matches
# ============================================================================


class TestActionMatches:
    """Tests for action applicability."""

    def test_same_action_matches(self):
        """Given equal action names, matches."""
        assert action_matches("read", Rule("read", Product)) is True

    def test_different_action_does_not_match(self):
        """Given different action names, does not match."""
        assert action_matches("create", Rule("read", Product)) is False

    def test_manage_matches_any_action(self):
        """Given a 'manage' rule, matches actions never declared."""
        assert action_matches("archive", Rule("manage", Product)) is True

    def test_manage_request_does_not_widen_narrow_rule(self):
        """Given a request for 'manage', a 'read' rule does not match."""
        assert action_matches("manage", Rule("read", Product)) is False


class TestTargetMatches:
    """Tests for target applicability."""

    def test_exact_class_matches(self):
        """Given an instance of the rule's class, matches."""
        assert target_matches(Product(), Rule("read", Product)) is True

    def test_other_class_does_not_match(self):
        """Given an instance of another class, does not match."""
        assert target_matches(User(), Rule("read", Product)) is False

    def test_subclass_does_not_match(self):
        """Given a subclass instance, does not match (no inheritance)."""
        assert target_matches(SpecialProduct(), Rule("read", Product)) is False

    def test_all_matches_any_target(self):
        """Given an 'all' rule, matches every target type."""
        rule = Rule("read", "all")

        assert target_matches(User(), rule) is True
        assert target_matches(Product(), rule) is True
        assert target_matches({"plain": "dict"}, rule) is True


# ============================================================================
# Tests: get_property
# ============================================================================


class TestGetProperty:
    """Tests for property access on arbitrary targets."""

    def test_uses_get_method_when_present(self):
        """Given an object with get(), reads through it."""
        assert get_property(Product({"published": True}), "published") is True

    def test_reads_attribute_on_plain_object(self):
        """Given a plain object, reads the attribute."""
        assert get_property(Article(title="Hello"), "title") == "Hello"

    def test_mapping_uses_get(self):
        """Given a dict target, reads the key."""
        assert get_property({"published": False}, "published") is False

    def test_absent_property_is_none(self):
        """Given a missing property, returns None for both kinds of objects."""
        assert get_property(Article(), "missing") is None
        assert get_property(Product(), "missing") is None

    def test_non_callable_get_falls_back_to_attributes(self):
        """Given a non-callable 'get' field, reads attributes directly."""
        assert get_property(Settings(), "theme") == "dark"

    def test_class_is_read_as_field_container(self):
        """Given a class with an unbound get(), reads class attributes instead."""
        # Arrange
        class Catalog(Product):
            published = True

        # Act / Assert
        assert get_property(Product, "published") is None
        assert get_property(Catalog, "published") is True


# ============================================================================
# Tests: deep_equals
# ============================================================================


class TestDeepEquals:
    """Tests for structural equality."""

    @pytest.mark.parametrize(
        "actual,expected",
        [
            (1, 1),
            ("a", "a"),
            (None, None),
            ({"a": [1, 2, {"b": 3}]}, {"a": [1, 2, {"b": 3}]}),
            ([1, [2, 3]], [1, [2, 3]]),
            ({1, 2}, {2, 1}),
            (float("nan"), float("nan")),
        ],
    )
    def test_equal_values(self, actual, expected):
        """Given structurally equal values, returns True."""
        assert deep_equals(actual, expected) is True

    @pytest.mark.parametrize(
        "actual,expected",
        [
            (1, 2),
            (None, True),
            (1, True),
            (0, False),
            ({"a": 1}, {"a": 1, "b": 2}),
            ({"a": 1}, {"a": 2}),
            ([1, 2], [2, 1]),
            ([1, 2], (1, 2)),
            ([1], {"0": 1}),
        ],
    )
    def test_unequal_values(self, actual, expected):
        """Given structurally different values, returns False."""
        assert deep_equals(actual, expected) is False

    def test_compares_by_value_not_identity(self):
        """Given two distinct but equal objects, returns True."""
        expected = {"tags": ["a"]}

        assert deep_equals({"tags": ["a"]}, expected) is True


# ============================================================================
# Tests: matches_attributes / attrs_match
# ============================================================================


class TestMatchesAttributes:
    """Tests for attribute-object constraints."""

    def test_all_keys_must_match(self):
        """Given several keys, all must deep-equal."""
        product = Product({"published": True, "category": "books"})

        assert matches_attributes(product, {"published": True, "category": "books"}) is True
        assert matches_attributes(product, {"published": True, "category": "music"}) is False

    def test_empty_mapping_matches(self):
        """Given no keys, matches."""
        assert matches_attributes(Product(), {}) is True


class TestAttrsMatch:
    """Tests for resolving a rule's attribute constraint."""

    @pytest.mark.asyncio
    async def test_no_attrs_always_matches(self):
        """Given a rule without attrs, resolves True."""
        assert await attrs_match(Rule("read", Product), Product()) is True

    @pytest.mark.asyncio
    async def test_mapping_attrs(self):
        """Given mapping attrs, resolves by property comparison."""
        rule = Rule("read", Product, {"published": True})

        assert await attrs_match(rule, Product({"published": True})) is True
        assert await attrs_match(rule, Product()) is False

    @pytest.mark.asyncio
    async def test_sync_predicate(self):
        """Given a sync predicate, resolves its result."""
        rule = Rule("read", Product, lambda product: product.get("published") is True)

        assert await attrs_match(rule, Product({"published": True})) is True
        assert await attrs_match(rule, Product()) is False

    @pytest.mark.asyncio
    async def test_async_predicate(self):
        """Given an async predicate, awaits its result."""

        async def is_published(product):
            await asyncio.sleep(0)
            return product.get("published") is True

        rule = Rule("read", Product, is_published)

        assert await attrs_match(rule, Product({"published": True})) is True
        assert await attrs_match(rule, Product()) is False

    @pytest.mark.asyncio
    async def test_predicate_returning_future(self):
        """Given a sync predicate returning a future, awaits the future."""
        loop = asyncio.get_running_loop()

        def deferred(product):
            future = loop.create_future()
            loop.call_soon(future.set_result, True)
            return future

        assert await attrs_match(Rule("read", Product, deferred), Product()) is True

    @pytest.mark.asyncio
    async def test_extra_arguments_are_forwarded(self):
        """Given extra arguments, passes them after the target."""
        received = []

        def predicate(product, *extra):
            received.append((product, extra))
            return True

        product = Product()
        await attrs_match(Rule("read", Product, predicate), product, "owner", 42)

        assert received == [(product, ("owner", 42))]

    @pytest.mark.asyncio
    async def test_results_are_coerced_to_bool(self):
        """Given non-bool predicate results, coerces them."""
        assert await attrs_match(Rule("read", Product, lambda p: "yes"), Product()) is True
        assert await attrs_match(Rule("read", Product, lambda p: None), Product()) is False
        assert await attrs_match(Rule("read", Product, lambda p: 0), Product()) is False

    @pytest.mark.asyncio
    async def test_predicate_exception_propagates(self):
        """Given a failing predicate, the exception is not wrapped."""

        def broken(product):
            raise LookupError("backend down")

        with pytest.raises(LookupError, match="backend down"):
            await attrs_match(Rule("read", Product, broken), Product())
