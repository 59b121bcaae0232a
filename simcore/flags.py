"""Process-wide runtime flags.

Simulation runtimes toggle a few behaviors per launch: whether runtime
assertions fire, whether deprecation warnings are printed, and how log
output is rendered. These switches are read once from the environment
and can be overridden programmatically (tests do this constantly).

Priority chain (highest to lowest):
  1. set_flags() keyword overrides
  2. Env vars     -- ``SIMCORE_*`` prefix
  3. Code defaults

Environment variables:
    SIMCORE_ASSERTIONS            -- enable sim_assert / assert_has_properties
    SIMCORE_DEPRECATION_WARNINGS  -- print deprecation_warning messages
    SIMCORE_VERBOSE               -- DEBUG-level logging for the simcore logger
    SIMCORE_LOG_JSON              -- JSON log lines instead of console output

Values are validated by Pydantic as booleans (1/0, true/false, yes/no,
on/off, case-insensitive); anything else raises ValidationError.

Example:
    from simcore.flags import get_flags, set_flags

    set_flags(assertions=True)
    assert get_flags().assertions
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class RuntimeFlags(BaseSettings):
    """Runtime switches for assertion, deprecation and logging behavior."""

    model_config = {
        "frozen": True,
        "env_prefix": "SIMCORE_",
        "extra": "forbid",
    }

    assertions: bool = False
    deprecation_warnings: bool = False
    verbose: bool = False
    log_json: bool = False


_flags: RuntimeFlags | None = None


def get_flags() -> RuntimeFlags:
    """Return the process-wide flags, loading them from the environment on first use."""
    global _flags
    if _flags is None:
        _flags = RuntimeFlags()
    return _flags


def set_flags(**changes: bool) -> RuntimeFlags:
    """Override individual flags and return the resulting flags.

    The merged values are validated again, so ``set_flags(assertions="off")``
    yields ``assertions=False`` and a non-boolean value is rejected.

    Raises:
        pydantic.ValidationError: If a value is not a boolean or a keyword
            does not name a RuntimeFlags field.
    """
    global _flags
    _flags = RuntimeFlags(**{**get_flags().model_dump(), **changes})
    return _flags


def reset_flags() -> None:
    """Forget overrides; the next get_flags() re-reads the environment."""
    global _flags
    _flags = None
