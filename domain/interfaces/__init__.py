from .transaction_repo import TransactionRepository
from .user_repo import UserRepository
from .metrics_port import MetricsPort
from .logging_port import LoggingPort, BoundLogger

__all__ = ["TransactionRepository", "UserRepository", "MetricsPort", "LoggingPort", "BoundLogger"]
