from decimal import Decimal
from typing_extensions import Protocol
from typing import Optional
from domain.entities import User


class UserRepository(Protocol):
    async def find_by_id(self, user_id: int) -> Optional[User]: ...
    async def decrement_balance(self, user_id: int, amount: Decimal) -> int: ...
