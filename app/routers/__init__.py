from .history import router as history_router
from .landing import router as landing_router
from .withdraw import router as withdraw_router

__all__ = ["history_router", "landing_router", "withdraw_router"]
