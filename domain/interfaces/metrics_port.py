from typing_extensions import Protocol


class MetricsPort(Protocol):
    """Protocol for metrics operations."""

    def increment_withdrawal(self, outcome: str) -> None:
        """
        Increment the withdrawals_total counter.

        Args:
            outcome: One of "completed", "insufficient_funds" or "not_found"
        """
        ...

    def increment_storage_error(self, component: str) -> None:
        """
        Increment the storage_errors_total counter.

        Args:
            component: Name of the data access component that failed
        """
        ...
