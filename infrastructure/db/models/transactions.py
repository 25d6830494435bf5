from datetime import datetime
from decimal import Decimal
from sqlalchemy import Column, BigInteger, Integer, String, Numeric, DateTime
from sqlalchemy.orm import Mapped
from domain.entities import Transaction, TransactionType
from infrastructure.db.models.base import Base


def to_storage_time(value: datetime) -> datetime:
    """Convert a zoned timestamp to naive server-local time for the TIMESTAMP column."""
    return value.astimezone().replace(tzinfo=None)


def from_storage_time(value: datetime) -> datetime:
    """Interpret a stored naive timestamp as server-local time."""
    return value.astimezone()


class TransactionModel(Base):
    __tablename__ = "transactions"
    id: Mapped[int] = Column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = Column("userid", BigInteger, nullable=False, index=True)
    type: Mapped[str] = Column(String(16), nullable=False)
    amount: Mapped[Decimal] = Column(Numeric(19, 2), nullable=False)
    time: Mapped[datetime] = Column(DateTime, nullable=False)

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            user_id=self.user_id,
            type=TransactionType(self.type),
            amount=self.amount,
            time=from_storage_time(self.time),
        )

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionModel":
        # id is left to the database
        return cls(
            user_id=transaction.user_id,
            type=TransactionType(transaction.type).value,
            amount=transaction.amount,
            time=to_storage_time(transaction.time),
        )
