"""REST endpoint receiving cold store status reports."""

import logging

from fastapi import APIRouter, Depends, Request

from api.dependency import get_alert_dispatcher
from api.model.responses import ErrorResponse, WebhookAckResponse
from core.handler.alert_dispatcher import AlertDispatcher

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/webhook",
    response_model=WebhookAckResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Receive status report",
    description="Check a controller status report and email an alert for every fault it shows",
)
async def receive_status_report(
    request: Request,
    dispatcher: AlertDispatcher = Depends(get_alert_dispatcher),
) -> WebhookAckResponse:
    """
    Accepts `{"values": [{"name": ..., "value": ...}, ...]}`.

    - Empty body: nothing is checked
    - Missing fields: the matching condition is treated as not triggered
    - Body that is not a JSON report: 400, no alert sent
    """
    body: bytes = await request.body()
    result: dict = await dispatcher.handle(body)
    return WebhookAckResponse(**result)
