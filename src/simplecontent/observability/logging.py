"""structlog wiring for simplecontent.

Every record goes through the stdlib root logger. Events from
get_logger() run the structlog processors below; plain
logging.getLogger() records get the same fields through the formatter's
foreign_pre_chain. The one handler setup_logging() installs renders both,
as JSON lines or console lines, to stderr or to SIMPLECONTENT_LOG_PATH.

get_logger() leaves structlog's global configuration alone, so embedding
applications keep theirs. Until setup_logging() runs, stdlib levels apply:
debug events are dropped and warnings reach stderr through logging's
last-resort handler.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

from simplecontent.observability.config import LOG_FORMATS, ObservabilityConfig

# Marks the handler setup_logging() owns so reconfiguring leaves others alone
_OWNED = "_simplecontent_handler"

_ENRICH = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    *_ENRICH,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def get_logger(name: str = "", **initial_values) -> structlog.stdlib.BoundLogger:
    """Logger taking ``logger.info("event", key=value)`` calls.

    Safe to bind at import time; output follows whatever setup_logging()
    installs later.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


def _renderer(config: ObservabilityConfig):
    if config.log_format not in LOG_FORMATS:
        raise ValueError(
            f"Unknown log format {config.log_format!r}. Use one of: {', '.join(LOG_FORMATS)}."
        )
    if config.log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def _open_handler(config: ObservabilityConfig) -> logging.Handler:
    if not config.log_path:
        return logging.StreamHandler(sys.stderr)
    path = Path(config.log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _drop_owned_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if getattr(handler, _OWNED, False):
            root.removeHandler(handler)
            handler.close()


def setup_logging(config: ObservabilityConfig | None = None) -> None:
    """Install the simplecontent handler on the root logger.

    Calling it again replaces the previous simplecontent handler. Handlers
    added by anyone else (pytest's caplog, a host application) stay.
    Raises ValueError for an unknown level or format, before touching
    any handler.
    """
    config = config or ObservabilityConfig()
    level = config.level_number()
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config),
        ],
        foreign_pre_chain=_ENRICH,
    )

    handler = _open_handler(config)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED, True)

    root = logging.getLogger()
    _drop_owned_handlers(root)
    root.addHandler(handler)
    root.setLevel(level)


def reset_logging() -> None:
    """Close and detach the simplecontent handler, if one is installed."""
    _drop_owned_handlers(logging.getLogger())
