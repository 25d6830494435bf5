from decimal import Decimal
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from domain.entities import Transaction, TransactionType, User
from domain.exceptions import DataAccessError, InsufficientFundsError, UserNotFoundError
from domain.interfaces import TransactionRepository, UserRepository, LoggingPort, MetricsPort
from infrastructure.db.repositories import TransactionDAO, UserDAO
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.metrics.metrics_adapter import MetricsAdapter


class ApplicationService:
    def __init__(
        self,
        db: AsyncSession,
        transaction_repo: Optional[TransactionRepository] = None,
        user_repo: Optional[UserRepository] = None,
        logging_port: Optional[LoggingPort] = None,
        metrics_port: Optional[MetricsPort] = None,
    ):
        """
        Orchestrates the transaction and user DAOs for the HTTP handlers.

        The service owns ``db`` for its whole lifetime and releases it in
        ``close()``.

        Args:
            db: Session shared by both DAOs so a withdrawal commits atomically
            transaction_repo: Transaction DAO (defaults to TransactionDAO over ``db``)
            user_repo: User DAO (defaults to UserDAO over ``db``)
            logging_port: Logging port for structured logging (optional)
            metrics_port: Metrics port for emitting metrics (optional)
        """
        self.db = db
        self.logging_port = logging_port or LoggingAdapter()
        self.metrics_port = metrics_port or MetricsAdapter()
        self.transaction_repo = transaction_repo or TransactionDAO(db, self.logging_port, self.metrics_port)
        self.user_repo = user_repo or UserDAO(db, self.logging_port, self.metrics_port)

    async def get_all_transactions(self) -> list[Transaction]:
        return await self.transaction_repo.find_all()

    async def get_transactions_by_user_id(self, user_id: int) -> list[Transaction]:
        return await self.transaction_repo.find_by_user_id(user_id)

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        return await self.user_repo.find_by_id(user_id)

    async def withdraw_money(self, user_id: int, amount: Decimal) -> None:
        """
        Decrement the user's balance and record a withdraw transaction.

        Callers check the balance first to show a friendly form; the UPDATE
        itself is guarded too, so a withdrawal that raced another one and no
        longer fits fails here instead of overdrawing. Both writes commit together.

        Raises:
            UserNotFoundError: If no user row matched ``user_id``
            InsufficientFundsError: If the balance no longer covers ``amount``
            DataAccessError: If the storage layer failed
        """
        log = self.logging_port.bind(component="application_service", user_id=user_id)
        try:
            updated = await self.user_repo.decrement_balance(user_id, amount)
            if updated == 0:
                if await self.user_repo.find_by_id(user_id) is None:
                    raise UserNotFoundError(user_id)
                raise InsufficientFundsError(user_id, amount)
            await self.transaction_repo.save(
                Transaction.create(user_id=user_id, type=TransactionType.WITHDRAW, amount=amount)
            )
            await self.db.commit()
        except (UserNotFoundError, InsufficientFundsError, DataAccessError):
            await self.db.rollback()
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            log.error("withdraw_commit_failed", exc_info=True, error=str(e))
            self.metrics_port.increment_storage_error("application_service")
            raise DataAccessError(f"withdraw commit failed: {e}", operation="withdraw_money") from e

        self.metrics_port.increment_withdrawal("completed")
        log.info("withdraw_completed", amount=str(amount))

    async def close(self) -> None:
        """Release the database session held by this service."""
        await self.db.close()
