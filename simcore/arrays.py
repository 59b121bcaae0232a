"""Small list helpers."""

from __future__ import annotations

from itertools import combinations
from typing import Any, MutableSequence, Sequence

import numpy as np

from simcore.assertions import sim_assert


def _equal(a: Any, b: Any) -> bool:
    # elementwise == on arrays has no single truth value
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return isinstance(a, np.ndarray) and isinstance(b, np.ndarray) and bool(np.array_equal(a, b))
    return bool(a == b)


def array_remove(values: MutableSequence, item: Any) -> None:
    """Remove the first occurrence of ``item`` from ``values`` in place.

    Identity is checked before equality, so a specific object is removed even
    when an earlier element compares equal to it. Later duplicates are kept.
    numpy arrays compare equal when they have the same shape and elements.

    Raises:
        AssertionError: If ``item`` is absent and assertions are enabled.
            With assertions disabled a missing item is ignored.
    """
    index = next((i for i, v in enumerate(values) if v is item), None)
    if index is None:
        index = next((i for i, v in enumerate(values) if _equal(v, item)), None)
    sim_assert(index is not None, "item not found in sequence")
    if index is not None:
        del values[index]


def pairs(values: Sequence) -> list[tuple]:
    """All unordered pairs ``(values[i], values[j])`` with ``i < j``.

    pairs(["a", "b", "c"]) -> [("a", "b"), ("a", "c"), ("b", "c")]
    """
    return list(combinations(values, 2))
