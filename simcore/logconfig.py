"""structlog rendering for simcore's stdlib loggers.

simcore modules log through ``logging.getLogger(__name__)`` and never emit
on stdout. configure_logging() is an opt-in for hosts that want simcore's
records rendered by structlog, either as colored console lines or as JSON
lines on stderr. It adds a single named handler to the root logger and
leaves any handlers the host installed in place.
"""

from __future__ import annotations

import logging
import sys

import structlog

from simcore.flags import get_flags

HANDLER_NAME = "simcore"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Render log records through structlog on stderr.

    Args:
        verbose: DEBUG-level output for the ``simcore`` logger; WARNING+
            otherwise. None falls back to the runtime flags.
        log_json: JSON lines instead of console output. None falls back
            to the runtime flags.

    Calling it again replaces simcore's handler instead of adding another.
    """
    flags = get_flags()
    if verbose is None:
        verbose = flags.verbose
    if log_json is None:
        log_json = flags.log_json

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    logging.getLogger("simcore").setLevel(logging.DEBUG if verbose else logging.WARNING)
