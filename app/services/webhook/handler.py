"""Webhook event processing.

WebhookHandler.handle() walks the events of one callback in arrival order.
For each event it does exactly these things:
1. Skip anything that is not a ``message`` event
2. Non-text message → reply with the fallback prompt
3. Text message → pick direction, translate, reply with the joined translation

Any error on the translation path aborts the rest of the invocation: later
events are not processed and the error propagates to the route, which turns
it into an error response. A failed fallback reply is only logged.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from app.core.exceptions import ReplyDeliveryError, TranslatorBotError
from app.schemas.line import WebhookEnvelope, WebhookEvent
from app.services.language.routing import LanguagePair, route
from app.services.line.reply import LineReplyClient
from app.services.translation.deepl import DeepLClient

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EventOutcome:
    """What the handler did with one event."""

    reply_token: str | None
    pair: LanguagePair | None = None
    reply_text: str | None = None
    skipped: bool = False


class WebhookHandler:
    """Routes webhook events through translation and back to the sender."""

    def __init__(
        self,
        translator: DeepLClient,
        replier: LineReplyClient,
        fallback_reply_text: str,
        separator: str = "-",
        reply_on_error: bool = False,
        error_reply_text: str = "",
    ) -> None:
        self._translator = translator
        self._replier = replier
        self._fallback_reply_text = fallback_reply_text
        self._separator = separator
        self._reply_on_error = reply_on_error
        self._error_reply_text = error_reply_text

    async def handle(self, envelope: WebhookEnvelope) -> list[EventOutcome]:
        """Process every event of one callback, stopping at the first error."""
        outcomes: list[EventOutcome] = []
        for index, event in enumerate(envelope.events):
            try:
                outcomes.append(await self.handle_event(event))
            except TranslatorBotError as e:
                logger.error(
                    "webhook_invocation_aborted",
                    code=e.code,
                    error=e.message,
                    event_index=index,
                    events_total=len(envelope.events),
                )
                raise
        return outcomes

    async def handle_event(self, event: WebhookEvent) -> EventOutcome:
        """Process a single event."""
        if not event.is_message:
            logger.debug("webhook_event_skipped", event_type=event.type)
            return EventOutcome(reply_token=event.reply_token, skipped=True)

        if not event.reply_token:
            logger.warning("webhook_event_without_reply_token", event_type=event.type)
            return EventOutcome(reply_token=None, skipped=True)

        text = event.text
        if text is None:
            return await self._reply_fallback(event)

        pair = route(text)
        try:
            result = await self._translator.translate(text, pair)
        except TranslatorBotError:
            if self._reply_on_error:
                await self._reply_error(event)
            raise

        reply_text = result.joined(self._separator)
        await self._replier.reply_text(event.reply_token, reply_text)
        return EventOutcome(
            reply_token=event.reply_token,
            pair=pair,
            reply_text=reply_text,
        )

    async def _reply_fallback(self, event: WebhookEvent) -> EventOutcome:
        message_type = event.message.type if event.message else None
        logger.info("non_text_message", message_type=message_type)
        try:
            await self._replier.reply_text(event.reply_token, self._fallback_reply_text)
        except ReplyDeliveryError as e:
            logger.warning("fallback_reply_failed", error=e.message)
        return EventOutcome(
            reply_token=event.reply_token,
            reply_text=self._fallback_reply_text,
        )

    async def _reply_error(self, event: WebhookEvent) -> None:
        try:
            await self._replier.reply_text(event.reply_token, self._error_reply_text)
        except ReplyDeliveryError as e:
            logger.warning("error_reply_failed", error=e.message)
