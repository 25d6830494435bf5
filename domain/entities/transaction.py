from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


@dataclass
class Transaction:
    user_id: int
    type: TransactionType
    amount: Decimal  # always a positive magnitude, direction comes from type
    time: datetime
    id: Optional[int] = None

    @staticmethod
    def create(user_id: int, type: TransactionType, amount: Decimal) -> 'Transaction':
        return Transaction(
            user_id=user_id,
            type=TransactionType(type),
            amount=amount,
            time=datetime.now().astimezone(),
        )
