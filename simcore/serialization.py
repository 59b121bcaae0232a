"""Deterministic JSON output for baseline and override files.

Files that are checked into version control and diffed between runs need a
stable key order. copy_with_sorted_keys() rebuilds a JSON-like value with
every mapping's keys sorted, recursively; to_sorted_json() serializes the
result, converting numpy values along the way.

Usage::

    from simcore.serialization import to_sorted_json

    text = to_sorted_json({"b": np.arange(3), "a": {"z": 1, "y": 2}}, indent=2)
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import numpy as np


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        if isinstance(obj, (np.bool_,)):
            return bool(obj)
        return super().default(obj)


def copy_with_sorted_keys(value: Any) -> Any:
    """Return a recursive copy of ``value`` with all mapping keys sorted.

    Mappings become plain dicts in sorted key order, lists and tuples are
    copied element-wise (keeping their type), and anything else is returned
    as-is. The input is not modified.
    """
    if isinstance(value, Mapping):
        return {key: copy_with_sorted_keys(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [copy_with_sorted_keys(item) for item in value]
    if isinstance(value, tuple):
        return tuple(copy_with_sorted_keys(item) for item in value)
    return value


def to_sorted_json(value: Any, **kwargs) -> str:
    """Serialize ``value`` to JSON with sorted keys and numpy support."""
    return json.dumps(copy_with_sorted_keys(value), cls=NumpyEncoder, **kwargs)
