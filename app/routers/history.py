from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from application.service import ApplicationService
from app.dependencies import get_application_service, get_app_config
from app.views import templates
from domain.config import AppConfig

router = APIRouter()


@router.get("/history", response_class=HTMLResponse)
async def history(
    request: Request,
    service: ApplicationService = Depends(get_application_service),
    config: AppConfig = Depends(get_app_config),
):
    """
    Transaction history page.

    Shows the full ledger and, separately, the transactions of the
    configured history account (HISTORY_USER_ID, 1 by default).
    """
    user_id = config.history.history_user_id
    hist_list = await service.get_all_transactions()
    hist_list_id = await service.get_transactions_by_user_id(user_id)
    return templates.TemplateResponse(
        request,
        "history.html",
        {"hist_list": hist_list, "hist_list_id": hist_list_id, "history_user_id": user_id},
    )
