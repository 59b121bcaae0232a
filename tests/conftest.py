"""Shared test fixtures for the simcore test suite.

Provides the nested grids used throughout the dimension tests and resets
process-wide state between tests:

    dim2: 2-level grid [[1, 4, 10], [5, 3, -1]]
    dim3: ragged 3-level grid with rows of differing lengths

Runtime flags, the deprecation-warning registry and structlog configuration
are global; the autouse fixture restores them after every test so tests can
flip flags freely.
"""

import pytest
import structlog

from simcore.deprecation import reset_deprecation_warnings
from simcore.flags import reset_flags

DIM2 = [[1, 4, 10], [5, 3, -1]]
DIM3 = [[[1, 9, 25], [23]], [[5, 5, 5, 5], [2, 9], [1], [3, -10]]]


# ---- Pytest fixtures ----

@pytest.fixture(autouse=True)
def _reset_global_state(monkeypatch):
    """Start every test from default flags and an empty deprecation registry."""
    for name in (
        "SIMCORE_ASSERTIONS",
        "SIMCORE_DEPRECATION_WARNINGS",
        "SIMCORE_VERBOSE",
        "SIMCORE_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_flags()
    reset_deprecation_warnings()
    yield
    reset_flags()
    reset_deprecation_warnings()
    structlog.reset_defaults()


@pytest.fixture
def dim2():
    """2-level grid, 2 rows of 3."""
    return [list(row) for row in DIM2]


@pytest.fixture
def dim3():
    """Ragged 3-level grid."""
    return [[list(inner) for inner in outer] for outer in DIM3]
