"""Tests for flag-gated runtime assertions (simcore.assertions)."""

import pytest

from simcore.assertions import assert_has_properties, sim_assert
from simcore.flags import set_flags


class _Base:
    shared = "class attribute"

    def get_opacity(self):
        return 1.0


class _Node(_Base):
    __slots__ = ("_opacity",)

    def __init__(self):
        self._opacity = 0.5
        self.label = "node"

    @property
    def opacity(self):
        raise RuntimeError("getter must not run")


class TestSimAssert:
    """Tests for sim_assert."""

    def test_disabled_by_default(self):
        sim_assert(False, "never raised")

    def test_enabled_raises(self):
        set_flags(assertions=True)
        with pytest.raises(AssertionError, match="bad state"):
            sim_assert(False, "bad state")

    def test_enabled_passes_truthy(self):
        set_flags(assertions=True)
        sim_assert([1], "non-empty list is truthy")

    def test_lazy_message(self):
        calls = []

        def message():
            calls.append(1)
            return "computed"

        set_flags(assertions=True)
        sim_assert(True, message)
        assert calls == []
        with pytest.raises(AssertionError, match="computed"):
            sim_assert(0, message)


class TestAssertHasProperties:
    """Tests for assert_has_properties."""

    @pytest.fixture(autouse=True)
    def _assertions_on(self):
        set_flags(assertions=True)

    def test_mapping_keys(self):
        assert_has_properties({"tree": 1, "flower": 2}, ["tree"])
        assert_has_properties({"tree": 1, "flower": 2}, ["tree", "flower"])

    def test_mapping_missing_key(self):
        with pytest.raises(AssertionError, match="property not defined: tree"):
            assert_has_properties({"flower": 2}, ["tree"])
        with pytest.raises(AssertionError, match="property not defined: flower"):
            assert_has_properties({"tree": 1}, ["tree", "flower"])

    def test_class_hierarchy(self):
        """Instance, slot, property, own-class and base-class names all count."""
        assert_has_properties(_Node(), ["label", "_opacity", "opacity", "get_opacity", "shared"])

    def test_missing_attribute(self):
        with pytest.raises(AssertionError, match="property not defined: visible"):
            assert_has_properties(_Node(), ["opacity", "visible"])

    def test_falsy_object_skipped(self):
        assert_has_properties(None, ["anything"])
        assert_has_properties({}, ["anything"])

    def test_disabled(self):
        set_flags(assertions=False)
        assert_has_properties({"flower": 2}, ["tree"])
