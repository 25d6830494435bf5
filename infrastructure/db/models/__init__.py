"""
Database models package.
Import Base from here or from base.py directly.
"""
from infrastructure.db.models.base import Base

# Import all models to ensure they're registered in the same registry
# This must be done after Base is created
from infrastructure.db.models.transactions import TransactionModel
from infrastructure.db.models.users import UserModel

__all__ = ["Base", "TransactionModel", "UserModel"]
