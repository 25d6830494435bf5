"""
Configuration module for the bank history gateway.

All configuration values are loaded from environment variables with sensible defaults.
Database connection settings live in infrastructure/db/database.py.
"""
import os
from dataclasses import dataclass, field


def _get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    return int(os.getenv(key, default))


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.getenv(key, default)


@dataclass
class HistoryConfig:
    """History page settings."""

    # The history page always shows one account next to the full ledger
    history_user_id: int = _get_int("HISTORY_USER_ID", 1)


@dataclass
class WithdrawConfig:
    """Withdrawal flow settings."""

    landing_path: str = _get_str("LANDING_PATH", "/service")
    insufficient_funds_message: str = "Not enough money on the card"
    non_positive_amount_message: str = "Amount must be positive"
    sub_cent_amount_message: str = "Amount must not have more than two decimal places"
    not_found_template: str = "NO SUCH USER WITH ID {user_id}"


@dataclass
class AppConfig:
    """Top-level application configuration."""

    service_name: str = _get_str("SERVICE_NAME", "bank-history-gateway")
    history: HistoryConfig = field(default_factory=HistoryConfig)
    withdraw: WithdrawConfig = field(default_factory=WithdrawConfig)


# Global configuration instance (lazy loaded)
_app_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config