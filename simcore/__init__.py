"""Simcore: runtime utilities for simulation code.

Small, dependency-light helpers that simulation models and their build
tooling share: element-wise mapping over nested grids of a declared depth,
list and JSON helpers, runtime assertions that can be switched on per
process, one-shot deprecation warnings, and lookup of optional hooks by
dotted path.

Modules:
    dimension     -- dimension_map / dimension_for_each over nested sequences of a declared depth
    arrays        -- array_remove (first occurrence, in place) and pairs (all unordered pairs)
    serialization -- copy_with_sorted_keys and numpy-aware, key-sorted JSON output
    assertions    -- sim_assert and assert_has_properties, gated by the assertions flag
    deprecation   -- deprecation_warning, logged once per message
    binding       -- graceful_bind: resolve an optional method by dotted path
    flags         -- RuntimeFlags settings loaded from SIMCORE_* environment variables
    logconfig     -- opt-in structlog rendering (console or JSON lines on stderr)
"""

from simcore.dimension import (
    DimensionMismatchError,
    Transform,
    dimension_for_each,
    dimension_map,
    dimension_shape,
)
from simcore.arrays import array_remove, pairs
from simcore.serialization import NumpyEncoder, copy_with_sorted_keys, to_sorted_json
from simcore.assertions import assert_has_properties, sim_assert
from simcore.deprecation import deprecation_warning, reset_deprecation_warnings
from simcore.binding import graceful_bind
from simcore.flags import RuntimeFlags, get_flags, reset_flags, set_flags
from simcore.logconfig import configure_logging

__version__ = "0.1.0"

__all__ = [
    "DimensionMismatchError",
    "Transform",
    "dimension_for_each",
    "dimension_map",
    "dimension_shape",
    "array_remove",
    "pairs",
    "NumpyEncoder",
    "copy_with_sorted_keys",
    "to_sorted_json",
    "assert_has_properties",
    "sim_assert",
    "deprecation_warning",
    "reset_deprecation_warnings",
    "graceful_bind",
    "RuntimeFlags",
    "get_flags",
    "reset_flags",
    "set_flags",
    "configure_logging",
]
