"""structlog configuration for framedeps.

Two output modes, both on stderr so stdout stays pipeable:
- Human (default): console renderer, colored on a TTY
- JSON (--log-json): one structured JSON object per line

Stdlib loggers (``logging.getLogger(__name__)`` in the infrastructure
layer) are routed through the same processor chain.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# Shared by structlog-native and stdlib records.
_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog and route the stdlib root logger to stderr.

    Args:
        verbose: ``framedeps`` loggers emit DEBUG. Otherwise WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("framedeps").setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_context(**values: Any) -> None:
    """Attach *values* to every log line emitted for the rest of the command."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)
