"""Runtime assertions gated by the ``assertions`` runtime flag.

Unlike Python's ``assert`` statement these checks are switched on and off
per process (SIMCORE_ASSERTIONS or set_flags(assertions=True)) rather than
by interpreter optimization level, so a simulation can run with expensive
consistency checks in development and skip them in production.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable

from simcore.flags import get_flags


def sim_assert(predicate: Any, message: str | Callable[[], str] = "Assertion failed") -> None:
    """Raise AssertionError if assertions are enabled and ``predicate`` is falsy.

    Args:
        predicate: Value tested for truthiness.
        message: Error message, or a zero-argument callable producing it.
            The callable is only evaluated when the assertion fails.
    """
    if get_flags().assertions and not predicate:
        raise AssertionError(message() if callable(message) else message)


def _has_property(obj: Any, name: str) -> bool:
    if isinstance(obj, Mapping) and name in obj:
        return True
    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, Mapping) and name in instance_dict:
        return True
    return any(name in vars(klass) for klass in type(obj).__mro__)


def assert_has_properties(obj: Any, properties: Iterable[str]) -> None:
    """Assert that every name in ``properties`` is defined on ``obj``.

    A name counts as defined if it is a key of a mapping, an instance
    attribute, or is declared anywhere in the class hierarchy (methods,
    properties, class attributes, slots). Looking names up this way never
    triggers property getters.

    Example:
        assert_has_properties({"tree": 1, "flower": 2}, ["tree"])  # ok
        assert_has_properties({"flower": 2}, ["tree"])             # fails
        assert_has_properties(node, ["opacity", "_opacity"])

    Skipped entirely when assertions are disabled or ``obj`` is falsy.

    Raises:
        AssertionError: "property not defined: <name>" for the first
            missing name.
    """
    if not (get_flags().assertions and obj):
        return
    for name in properties:
        if not _has_property(obj, name):
            raise AssertionError(f"property not defined: {name}")
