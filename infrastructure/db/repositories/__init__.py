from .transaction_dao import TransactionDAO
from .user_dao import UserDAO

__all__ = ["TransactionDAO", "UserDAO"]
