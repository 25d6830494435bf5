"""
Logging adapter that implements LoggingPort on top of structlog.
"""
from typing import Any
from domain.interfaces import LoggingPort, BoundLogger
from infrastructure.logging.structlog_logs import logger as structlog_logger


class StructlogBoundLogger:
    """Wraps a structlog bound logger behind the BoundLogger protocol."""

    def __init__(self, bound_logger):
        self._logger = bound_logger

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, **kwargs)

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.error(event, exc_info=exc_info, **kwargs)


class LoggingAdapter:
    """
    Adapter that implements LoggingPort for structured logging.

    Every bound logger carries the service name plus whatever context the
    caller binds (component, operation, user_id, ...).
    """

    def __init__(self, service_name: str = "bank-history-gateway"):
        self.service_name = service_name

    def bind(self, **kwargs: Any) -> BoundLogger:
        bound_logger = structlog_logger.bind(service=self.service_name, **kwargs)
        return StructlogBoundLogger(bound_logger)
