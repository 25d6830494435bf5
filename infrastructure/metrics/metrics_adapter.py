"""
Metrics adapter that implements MetricsPort protocol on top of the Prometheus counters.
"""
from domain.interfaces import MetricsPort
from infrastructure.metrics.metrics import (
    withdrawals_total,
    storage_errors_total,
)


class MetricsAdapter:
    """Adapter that implements MetricsPort for emitting Prometheus metrics."""

    def increment_withdrawal(self, outcome: str) -> None:
        withdrawals_total.labels(outcome=outcome).inc()

    def increment_storage_error(self, component: str) -> None:
        storage_errors_total.labels(component=component).inc()
