"""LINE Messaging API webhook schemas.

Only the fields the bot reads are declared; anything else LINE sends is
ignored so new event attributes never break decoding.
"""

from pydantic import BaseModel, ConfigDict, Field

EVENT_TYPE_MESSAGE = "message"
MESSAGE_TYPE_TEXT = "text"


class EventSource(BaseModel):
    """Sender of an event (user, group or room)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str
    user_id: str | None = Field(default=None, alias="userId")


class EventMessage(BaseModel):
    """Message payload of a ``message`` event."""

    model_config = ConfigDict(extra="ignore")

    type: str
    id: str
    text: str | None = None


class WebhookEvent(BaseModel):
    """A single webhook event."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str
    reply_token: str | None = Field(default=None, alias="replyToken")
    timestamp: int | None = None
    mode: str | None = None
    source: EventSource | None = None
    message: EventMessage | None = None

    @property
    def is_message(self) -> bool:
        return self.type == EVENT_TYPE_MESSAGE

    @property
    def text(self) -> str | None:
        """Text of a text message event, None for every other event."""
        if (
            self.is_message
            and self.message is not None
            and self.message.type == MESSAGE_TYPE_TEXT
        ):
            return self.message.text or ""
        return None


class WebhookEnvelope(BaseModel):
    """POST /v1/callback request body."""

    model_config = ConfigDict(extra="ignore")

    destination: str = ""
    events: list[WebhookEvent] = []


class CallbackResponse(BaseModel):
    """POST /v1/callback response body."""

    status: str = "ok"
    processed: int
