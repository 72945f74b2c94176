"""Log routing for rangeprint.

Printed characters own stdout, so every log line goes to stderr:
console-rendered by default, JSON lines under ``--log-json``. The active
character table is bound once per run and rides on every record, stdlib
``logging`` calls included.
"""

from __future__ import annotations

import logging
import sys

import structlog

from rangeprint.domain.charset import ASCII

PACKAGE_LOGGER = "rangeprint"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    table: str = ASCII.name,
) -> None:
    """Install the stderr handler and bind the run's table name.

    Safe to call more than once: the root handler is replaced, and
    previously bound context is cleared.

    Args:
        verbose: Let ``rangeprint.*`` loggers emit DEBUG. Otherwise WARNING+.
        log_json: Render JSON lines instead of console text.
        table: Name of the character table, added to every record as ``table``.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(table=table)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
