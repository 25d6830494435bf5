from typing import AsyncIterator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from application.service import ApplicationService
from domain.config import AppConfig, get_config
from infrastructure.db.database import get_db_session


async def get_application_service(db: AsyncSession = Depends(get_db_session)) -> AsyncIterator[ApplicationService]:
    """
    One service per request. The service is closed when the response is done,
    which releases its session.
    """
    service = ApplicationService(db)
    try:
        yield service
    finally:
        await service.close()


def get_app_config() -> AppConfig:
    return get_config()
