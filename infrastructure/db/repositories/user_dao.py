from decimal import Decimal
from typing import Optional
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from domain.entities import User
from domain.interfaces import UserRepository
from infrastructure.db.models import UserModel
from infrastructure.db.repositories.base_dao import BaseDAO


class UserDAO(BaseDAO, UserRepository):
    """SQLAlchemy implementation of UserRepository."""

    component = "user_dao"

    async def find_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        try:
            result = await self.db.execute(stmt)
            user_model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._storage_error("find_by_id", e) from e
        return user_model.to_domain() if user_model else None

    async def decrement_balance(self, user_id: int, amount: Decimal) -> int:
        """
        Subtract ``amount`` from the user's balance in a single guarded UPDATE.

        The row only changes when the balance covers ``amount``, so concurrent
        withdrawals cannot overdraw. Returns the number of rows touched: 0 when
        the user does not exist or the balance is too low.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id, UserModel.balance >= amount)
            .values(balance=UserModel.balance - amount)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise self._storage_error("decrement_balance", e) from e
        return result.rowcount
