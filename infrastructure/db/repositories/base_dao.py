from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from domain.exceptions import DataAccessError
from domain.interfaces import LoggingPort, MetricsPort
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.metrics.metrics_adapter import MetricsAdapter


class BaseDAO:
    """
    Shared plumbing for the SQLAlchemy DAOs.

    Storage failures are logged once, counted, and re-raised as DataAccessError.
    Nothing is retried.
    """

    component = "dao"

    def __init__(
        self,
        db: AsyncSession,
        logging_port: Optional[LoggingPort] = None,
        metrics_port: Optional[MetricsPort] = None,
    ):
        self.db = db
        self.logging_port = logging_port or LoggingAdapter()
        self.metrics_port = metrics_port or MetricsAdapter()

    def _storage_error(self, operation: str, error: SQLAlchemyError) -> DataAccessError:
        """Log and count a storage failure, returning the error to raise. Call from an except block."""
        log = self.logging_port.bind(component=self.component, operation=operation)
        log.error(f"{self.component}_error", exc_info=True, error=str(error))
        self.metrics_port.increment_storage_error(self.component)
        return DataAccessError(f"{self.component}.{operation} failed: {error}", operation=operation)
