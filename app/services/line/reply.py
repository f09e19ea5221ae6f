"""LINE reply-message client.

Answers a webhook event through POST /v2/bot/message/reply using the
event's one-shot reply token.
"""

from __future__ import annotations

import httpx
import structlog

from app.core.exceptions import ReplyDeliveryError

logger = structlog.get_logger(__name__)

_REPLY_PATH = "/v2/bot/message/reply"


class LineReplyClient:
    """Sends text replies with the channel access token."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        channel_access_token: str,
        api_base_url: str = "https://api.line.me",
    ) -> None:
        self._http = http_client
        self._token = channel_access_token
        self._url = api_base_url.rstrip("/") + _REPLY_PATH

    async def reply_text(self, reply_token: str, text: str) -> None:
        """Reply to one event with a single text message."""
        payload = {
            "replyToken": reply_token,
            "messages": [{"type": "text", "text": text}],
        }
        try:
            response = await self._http.post(
                self._url,
                json=payload,
                headers={"Authorization": f"Bearer {self._token}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "reply_failed",
                status_code=e.response.status_code,
                body=e.response.text[:200],
            )
            raise ReplyDeliveryError(
                f"LINE reply rejected with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("reply_transport_failed", error=str(e))
            raise ReplyDeliveryError(f"LINE reply failed: {e}") from e

        logger.info("reply_sent", text_len=len(text))
