"""
Structured logging setup for the advisor engine and CLI.

PURPOSE:
- One JSON line per event on stderr, so the CLI's JSON result on stdout stays parseable.

CONTEXT:
- Library modules log through get_logger(), which wraps a stdlib logger. Until a host calls
  configure_logging() those events follow the host's own stdlib logging setup, which
  drops INFO by default and never prints to stdout.
"""

from __future__ import annotations
import logging
import os
import sys
import structlog

SERVICE_NAME = "PortfolioAdvisor"

# Level filtering first so disabled events skip the rest of the chain.
PROCESSORS = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(sort_keys=True),
)


def get_logger(name: str):
    """structlog logger backed by logging.getLogger(name)."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(stream=None):
    """
    Route advisor logs to `stream` (default stderr) as JSON.

    parameters:
    - stream: file-like|None – destination for log lines.

    returns:
    - structlog.BoundLogger – bound with service and env (ENV, default "dev").

    behaviour:
    - LOG_LEVEL picks the threshold (default INFO); unknown names fall back to INFO.
    - Replaces any handlers already on the root logger.

    example log entry:
    {"env": "dev", "event": "analysis.completed", "latency_ms": 1.4, "level": "info",
     "logger": "portfolio_advisor.pipeline", "service": "PortfolioAdvisor",
     "timestamp": "2026-10-19T13:00:00Z"}
    """
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=stream or sys.stderr, level=level, force=True)

    structlog.configure(
        processors=list(PROCESSORS),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    return get_logger("portfolio_advisor").bind(service=SERVICE_NAME, env=os.getenv("ENV", "dev"))
