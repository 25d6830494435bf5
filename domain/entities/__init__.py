# import
from .transaction import Transaction, TransactionType
from .user import User

__all__ = ["Transaction", "TransactionType", "User"]
