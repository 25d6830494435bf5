from decimal import Decimal
from typing import Optional
from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from application.service import ApplicationService
from app.dependencies import get_application_service, get_app_config
from app.views import templates
from domain.config import AppConfig
from domain.entities import User
from domain.exceptions import InsufficientFundsError, UserNotFoundError

router = APIRouter()


def _not_found(service: ApplicationService, config: AppConfig, user_id: int) -> HTTPException:
    service.metrics_port.increment_withdrawal("not_found")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=config.withdraw.not_found_template.format(user_id=user_id),
    )


def _render_form(request: Request, user: User, error_amount: Optional[str] = None):
    return templates.TemplateResponse(
        request,
        "withdraw.html",
        {"user": user, "error_amount": error_amount},
    )


@router.get("/withdraw", response_class=HTMLResponse)
async def withdraw_form(
    request: Request,
    id: int,
    service: ApplicationService = Depends(get_application_service),
    config: AppConfig = Depends(get_app_config),
):
    user = await service.get_user_by_id(id)
    if user is None:
        raise _not_found(service, config, id)
    return _render_form(request, user)


@router.post("/withdraw", response_class=HTMLResponse)
async def withdraw(
    request: Request,
    id: int = Form(...),
    amount: Decimal = Form(...),
    service: ApplicationService = Depends(get_application_service),
    config: AppConfig = Depends(get_app_config),
):
    """
    Withdraw ``amount`` from the user's card.

    Validation failures (non-positive or sub-cent amount, insufficient
    balance) re-render the form with an inline message and a 200 status.
    A successful withdrawal redirects to the landing page.
    """
    user = await service.get_user_by_id(id)
    if user is None:
        raise _not_found(service, config, id)

    if amount <= 0:
        return _render_form(request, user, config.withdraw.non_positive_amount_message)

    # Balances are stored in cents
    if amount.normalize().as_tuple().exponent < -2:
        return _render_form(request, user, config.withdraw.sub_cent_amount_message)

    if not user.can_withdraw(amount):
        service.metrics_port.increment_withdrawal("insufficient_funds")
        return _render_form(request, user, config.withdraw.insufficient_funds_message)

    try:
        await service.withdraw_money(id, amount)
    except UserNotFoundError:
        raise _not_found(service, config, id)
    except InsufficientFundsError:
        # Another withdrawal drained the balance after the check above
        service.metrics_port.increment_withdrawal("insufficient_funds")
        refreshed = await service.get_user_by_id(id) or user
        return _render_form(request, refreshed, config.withdraw.insufficient_funds_message)

    landing = request.scope.get("root_path", "") + config.withdraw.landing_path
    return RedirectResponse(url=landing, status_code=status.HTTP_302_FOUND)
