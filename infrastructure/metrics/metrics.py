# infrastructure/metrics/metrics.py
from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

withdrawals_total = Counter(
    "withdrawals_total",
    "Withdrawal attempts handled by the withdraw form",
    ["outcome"]  # completed|insufficient_funds|not_found
)

storage_errors_total = Counter(
    "storage_errors_total",
    "Storage failures raised by the data access layer",
    ["component"]  # transaction_dao|user_dao
)

def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
