from dataclasses import dataclass
from decimal import Decimal


@dataclass
class User:
    id: int
    balance: Decimal

    def can_withdraw(self, amount: Decimal) -> bool:
        return self.balance >= amount
