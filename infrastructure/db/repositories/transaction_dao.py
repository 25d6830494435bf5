from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from domain.entities import Transaction
from domain.interfaces import TransactionRepository
from infrastructure.db.models import TransactionModel
from infrastructure.db.repositories.base_dao import BaseDAO


class TransactionDAO(BaseDAO, TransactionRepository):
    """SQLAlchemy implementation of TransactionRepository."""

    component = "transaction_dao"

    async def find_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Get a transaction by ID, or None when no row matches."""
        stmt = select(TransactionModel).where(TransactionModel.id == transaction_id)
        try:
            result = await self.db.execute(stmt)
            transaction_model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._storage_error("find_by_id", e) from e
        return transaction_model.to_domain() if transaction_model else None

    async def find_by_user_id(self, user_id: int) -> list[Transaction]:
        """Get every transaction of a user, oldest first. Empty when the user has none."""
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.user_id == user_id)
            .order_by(TransactionModel.id)
        )
        try:
            result = await self.db.execute(stmt)
            transaction_models = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._storage_error("find_by_user_id", e) from e
        return [tm.to_domain() for tm in transaction_models]

    async def find_all(self) -> list[Transaction]:
        stmt = select(TransactionModel).order_by(TransactionModel.id)
        try:
            result = await self.db.execute(stmt)
            transaction_models = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._storage_error("find_all", e) from e
        return [tm.to_domain() for tm in transaction_models]

    async def save(self, transaction: Transaction) -> None:
        """
        Insert a transaction row (userid, type, amount, time).

        The row is flushed but not committed; the session owner decides when
        to commit. The generated id is not written back to ``transaction``.
        """
        try:
            self.db.add(TransactionModel.from_domain(transaction))
            await self.db.flush()
        except SQLAlchemyError as e:
            raise self._storage_error("save", e) from e
