from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from app.dependencies import get_app_config
from app.views import templates
from domain.config import AppConfig

router = APIRouter()


@router.get("/service", response_class=HTMLResponse)
async def landing(request: Request, config: AppConfig = Depends(get_app_config)):
    """Landing page the withdraw form redirects to after a successful withdrawal."""
    return templates.TemplateResponse(
        request,
        "service.html",
        {"history_user_id": config.history.history_user_id},
    )
