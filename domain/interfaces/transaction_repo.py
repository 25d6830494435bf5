from typing_extensions import Protocol
from typing import Optional
from domain.entities import Transaction


class TransactionRepository(Protocol):
    async def find_by_id(self, transaction_id: int) -> Optional[Transaction]: ...
    async def find_by_user_id(self, user_id: int) -> list[Transaction]: ...
    async def find_all(self) -> list[Transaction]: ...
    async def save(self, transaction: Transaction) -> None: ...
