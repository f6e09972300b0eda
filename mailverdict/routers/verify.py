from typing import Dict

from fastapi import APIRouter, Depends, Request

from ..models.card import FormState, StatusDisplay, VerificationCard, VerifyRequest
from ..services.form_controller import FormController
from ..services.presentation import STATUS_DISPLAY

router = APIRouter()


def get_controller(request: Request) -> FormController:
    return request.app.state.controller


@router.post("", response_model=VerificationCard)
async def verify(
    body: VerifyRequest,
    controller: FormController = Depends(get_controller),
):
    # pipeline failures come back as an "unknown" card, never a 5xx
    return await controller.check_email(body.email)


@router.get("/state", response_model=FormState)
async def state(controller: FormController = Depends(get_controller)):
    return controller.state()


@router.get("/statuses", response_model=Dict[str, StatusDisplay])
async def statuses():
    return {status.value: display for status, display in STATUS_DISPLAY.items()}
