"""simplecontent observability: structured logging through structlog.

Public API:
    setup_logging(cfg)   - Install the stderr or JSONL handler on the root logger
    get_logger(name)     - Get a structured logger
    reset_logging()      - Remove the installed handler
"""

from simplecontent.observability.config import ObservabilityConfig
from simplecontent.observability.logging import get_logger, reset_logging, setup_logging

__all__ = [
    "ObservabilityConfig",
    "get_logger",
    "reset_logging",
    "setup_logging",
]
