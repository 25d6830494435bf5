from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from infrastructure.metrics.metrics import metrics_endpoint
from infrastructure.logging.logging_adapter import LoggingAdapter
from app.routers import history_router, landing_router, withdraw_router
from domain.config import get_config
from domain.exceptions import DataAccessError

# Import database models to ensure they're registered
from infrastructure.db.models import Base, TransactionModel, UserModel  # noqa: F401

app = FastAPI(title="bank-history-gateway")
logging_port = LoggingAdapter(service_name=get_config().service_name)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logging_port.bind(step="http").info(
        "http_request",
        method=request.method,
        status=response.status_code,
        path=request.url.path,
        session_id=request.cookies.get("session_id"),
    )
    return response


@app.exception_handler(DataAccessError)
async def data_access_error_handler(request: Request, exc: DataAccessError):
    # The DAO already logged the cause at error level
    logging_port.bind(step="http").warning(
        "request_aborted_by_storage_error",
        method=request.method,
        path=request.url.path,
        operation=exc.operation,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": {"error": "storage_error", "message": "Storage is unavailable"}},
    )


@app.get("/metrics")
async def metrics():
    return metrics_endpoint()


@app.get("/health")
async def health():
    return {"status": "ok", "message": "bank-history-gateway is running"}


app.include_router(landing_router)
app.include_router(history_router)
app.include_router(withdraw_router)
