"""
structlog setup for the service.

LOG_LEVEL picks the threshold and LOG_FORMAT picks the renderer
(``json`` for deployments, ``console`` for local work).
"""
import logging
import os
import sys
import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").lower()


def configure_logging(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT) -> None:
    threshold = getattr(logging, level, logging.INFO)

    # stdlib logging carries sqlalchemy/uvicorn output to the same stream
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=threshold)

    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer(default=str)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
    )


configure_logging()

logger = structlog.get_logger()
