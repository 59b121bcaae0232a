"""One-shot deprecation warnings on the ``simcore.deprecation`` logger.

Each distinct message is logged at most once per process, so a deprecated
call inside a simulation step loop does not flood the log. Warnings are
only shown when the ``deprecation_warnings`` runtime flag is set (or when
the caller forces them with ``show=True``).

The logger is a plain stdlib logger, so output follows the host's logging
setup: configure_logging() renders it through structlog, and an
unconfigured process gets Python's last-resort handler on stderr.
"""

from __future__ import annotations

import logging

from simcore.flags import get_flags

logger = logging.getLogger(__name__)

# messages already logged
_seen: set[str] = set()


def deprecation_warning(message: str, show: bool | None = None) -> None:
    """Log ``"Deprecation warning: <message>"`` once.

    Args:
        message: Description of the deprecated usage.
        show: Force display on or off. None defers to the
            ``deprecation_warnings`` runtime flag.

    A suppressed call does not count as the message's one showing; the
    message is still logged the first time it is shown.
    """
    if show is None:
        show = get_flags().deprecation_warnings
    if show and message not in _seen:
        _seen.add(message)
        logger.warning(f"Deprecation warning: {message}")


def reset_deprecation_warnings() -> None:
    """Forget which messages have been shown."""
    _seen.clear()
