from decimal import Decimal
from sqlalchemy import Column, BigInteger, Integer, Numeric
from sqlalchemy.orm import Mapped
from domain.entities import User
from infrastructure.db.models.base import Base


class UserModel(Base):
    __tablename__ = "users"
    id: Mapped[int] = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    balance: Mapped[Decimal] = Column(Numeric(19, 2), nullable=False, default=Decimal("0.00"))

    def to_domain(self) -> User:
        return User(id=self.id, balance=self.balance)

    @classmethod
    def from_domain(cls, user: User) -> "UserModel":
        return cls(id=user.id, balance=user.balance)
