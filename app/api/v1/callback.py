"""LINE webhook callback endpoint."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, Header, Request
from pydantic import ValidationError

from app.api.deps import get_settings, get_webhook_handler
from app.core.config import Settings
from app.core.exceptions import InvalidPayloadError, InvalidSignatureError
from app.core.security import verify_signature
from app.schemas.line import CallbackResponse, WebhookEnvelope
from app.services.webhook.handler import WebhookHandler

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["callback"])


@router.post("/callback", response_model=CallbackResponse)
async def callback(
    request: Request,
    x_line_signature: str | None = Header(default=None, alias="X-Line-Signature"),
    config: Settings = Depends(get_settings),
    handler: WebhookHandler = Depends(get_webhook_handler),
) -> CallbackResponse:
    """Receive a webhook delivery and answer each of its events.

    Processing order:
    1. Verify X-Line-Signature against the raw body (if a secret is configured)
    2. Decode the envelope; a malformed body aborts before any event is touched
    3. WebhookHandler.handle()
    """
    body = await request.body()

    # 1. Signature
    if config.verify_signatures:
        if not verify_signature(body, x_line_signature, config.line_channel_secret):
            logger.warning("callback_signature_rejected")
            raise InvalidSignatureError()
    else:
        logger.warning("callback_signature_not_verified")

    # 2. Decode
    try:
        envelope = WebhookEnvelope.model_validate_json(body)
    except ValidationError as e:
        logger.warning("callback_payload_invalid", error_count=e.error_count())
        raise InvalidPayloadError(
            f"Webhook payload could not be decoded: {e.error_count()} error(s)"
        ) from e

    logger.info(
        "callback_received",
        destination=envelope.destination,
        events=len(envelope.events),
    )

    # 3. Handle
    outcomes = await handler.handle(envelope)
    processed = sum(1 for o in outcomes if not o.skipped)
    return CallbackResponse(processed=processed)
