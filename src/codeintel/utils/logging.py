"""structlog setup for the codeintel command line tools."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from codeintel import __version__ as CODEINTEL_VERSION
from codeintel.exceptions import InvalidArgument


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise InvalidArgument(f"Invalid log level: {level}")
    return resolved


def configure_logging(
    level: str | int = "INFO",
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Route structlog events through stdlib logging to ``stream``.

    Commands print their results on stdout, so logs default to stderr. The
    stream is resolved at call time, which lets test runners that swap
    ``sys.stderr`` capture the output.
    """
    numeric_level = _coerce_level(level)
    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    if json_output:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)
    )
    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)


def get_logger(name: str) -> BoundLogger:
    """
    Return a lazy logger with service metadata bound.

    Nothing is resolved until the first log call, so module-level loggers pick
    up whatever ``configure_logging`` installed later.
    """
    return structlog.stdlib.get_logger(
        name,
        service_name=os.getenv("SERVICE_NAME", "codeintel"),
        version=os.getenv("APP_VERSION", CODEINTEL_VERSION),
    )
