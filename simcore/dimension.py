"""Element-wise mapping over nested sequences of a declared depth.

A nested sequence of depth D is a list of lists of ... (D levels) whose
innermost elements are the leaves. The depth is not inferred from the data:
a leaf may itself be a list or tuple, so the caller states how many levels
to descend.

    dimension_map(1, [1, 2, 4], lambda x: 2 * x)
        -> [2, 4, 8]
    dimension_map(2, [[1, 4, 10], [5, 3, -1]], lambda x, i, j: (i, j))
        -> [[(0, 0), (0, 1), (0, 2)], [(1, 0), (1, 1), (1, 2)]]

Index threading:
    The transform receives the leaf followed by its index path, outermost
    index first. It only receives as many indices as its signature accepts,
    so ``lambda x: ...``, ``lambda x, i: ...`` and ``lambda x, *idx: ...``
    all work at any depth. Callables whose signature cannot be inspected
    (some builtins) receive the leaf alone.

Branches may be lists, tuples, other non-string sequences, or numpy arrays
(iterated along their first axis). Results are always freshly built lists;
inputs are never mutated.

Depth mismatch:
    If a level that should hold a sequence holds a scalar, the input is
    shallower than declared and DimensionMismatchError is raised before any
    further leaves at that branch are visited. Inputs deeper than declared
    are not detected: the sequences found at the leaf level are passed to
    the transform as ordinary leaves.
"""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from typing import Any, Callable, Protocol, runtime_checkable

import numpy as np


class DimensionMismatchError(ValueError):
    """Raised when a nested sequence is shallower than its declared depth."""


@runtime_checkable
class Transform(Protocol):
    """Protocol for a leaf transform.

    Called as ``transform(leaf, i_0, ..., i_k)`` where ``k + 1`` is the
    number of trailing positional parameters the callable declares, capped
    at the mapping depth. ``i_0`` is the position in the outermost sequence.

    Example:
        def scaled(value, row, col):
            return value * (row + 1) + col

        dimension_map(2, [[1, 2], [3, 4]], scaled)  # [[1, 3], [6, 9]]
    """

    def __call__(self, value: Any, *indices: int) -> Any:
        ...


def _check_depth(depth: int) -> None:
    if isinstance(depth, bool) or not isinstance(depth, (int, np.integer)):
        raise ValueError(f"depth must be an integer, got {type(depth).__name__}")
    if depth < 1:
        raise ValueError(f"depth must be >= 1, got {depth}")


def _is_branch(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _check_branch(values: Any, path: tuple[int, ...], depth: int) -> None:
    if not _is_branch(values):
        raise DimensionMismatchError(
            f"Expected a sequence at index path {list(path)} "
            f"(level {len(path) + 1} of {depth}), got {type(values).__name__}"
        )


def _index_arity(fn: Callable, depth: int) -> int:
    """Number of indices ``fn`` accepts after the leaf, capped at ``depth``."""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return 0
    positional = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return depth
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return max(0, min(positional - 1, depth))


def _map_level(
    values: Any,
    remaining: int,
    path: tuple[int, ...],
    transform: Callable,
    arity: int,
    depth: int,
) -> list:
    _check_branch(values, path, depth)
    if remaining == 1:
        return [
            transform(value, *(path + (i,))[:arity])
            for i, value in enumerate(values)
        ]
    return [
        _map_level(inner, remaining - 1, path + (i,), transform, arity, depth)
        for i, inner in enumerate(values)
    ]


def dimension_map(depth: int, values: Any, transform: Transform) -> list:
    """Map ``transform`` over every leaf of a nested sequence.

    Args:
        depth: Number of nesting levels to descend (>= 1). Depth 1 is a
            flat sequence of leaves.
        values: Nested sequence whose actual nesting is at least ``depth``.
        transform: Callable ``transform(leaf, *indices)``; see Transform.

    Returns:
        A new nested list with the same length at every level as ``values``,
        each leaf replaced by the transform's return value.

    Raises:
        ValueError: If ``depth`` is not an integer >= 1.
        DimensionMismatchError: If ``values`` is shallower than ``depth``.
    """
    _check_depth(depth)
    arity = _index_arity(transform, depth)
    return _map_level(values, depth, (), transform, arity, depth)


def dimension_for_each(depth: int, values: Any, callback: Transform) -> None:
    """Call ``callback(leaf, *indices)`` for every leaf, outermost index first.

    Traversal order, index threading and error behavior match dimension_map().
    """
    _check_depth(depth)
    arity = _index_arity(callback, depth)

    def visit(branch: Any, remaining: int, path: tuple[int, ...]) -> None:
        _check_branch(branch, path, depth)
        for i, item in enumerate(branch):
            if remaining == 1:
                callback(item, *(path + (i,))[:arity])
            else:
                visit(item, remaining - 1, path + (i,))

    visit(values, depth, ())


def dimension_shape(depth: int, values: Any) -> int | list:
    """Ragged shape of a nested sequence.

    At depth 1 the shape is the length. Deeper, it is the list of the
    shapes of each inner sequence at ``depth - 1``:

        dimension_shape(1, [7, 8, 9])          -> 3
        dimension_shape(2, [[1, 2], [3]])      -> [2, 1]
        dimension_shape(3, [[[1], []], [[]]])  -> [[1, 0], [0]]
    """
    _check_depth(depth)

    def measure(branch: Any, remaining: int, path: tuple[int, ...]) -> int | list:
        _check_branch(branch, path, depth)
        if remaining == 1:
            return len(branch)
        return [measure(inner, remaining - 1, path + (i,)) for i, inner in enumerate(branch)]

    return measure(values, depth, ())
