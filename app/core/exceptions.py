"""Custom exception classes for structured error handling.

Every stage of the callback pipeline (decode → classify → translate → reply)
raises one of these on failure. The first one raised aborts the current
invocation and is rendered by the FastAPI exception handler in app/main.py.
"""

from typing import Any


class TranslatorBotError(Exception):
    """Base exception for all translator bot errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class InvalidPayloadError(TranslatorBotError):
    def __init__(self, message: str = "Webhook payload could not be decoded") -> None:
        super().__init__(code="INVALID_PAYLOAD", message=message, status_code=400)


class InvalidSignatureError(TranslatorBotError):
    def __init__(self, message: str = "Invalid or missing X-Line-Signature") -> None:
        super().__init__(code="INVALID_SIGNATURE", message=message, status_code=401)


class TranslationProviderError(TranslatorBotError):
    """Non-2xx answer from the translation provider.

    ``provider_status`` keeps the upstream status code; ``status_code`` is the
    status this service answers with.
    """

    def __init__(self, message: str, provider_status: int) -> None:
        self.provider_status = provider_status
        super().__init__(
            code="TRANSLATION_PROVIDER_ERROR", message=message, status_code=502
        )


class TranslationTransportError(TranslatorBotError):
    def __init__(self, message: str = "Translation provider unreachable") -> None:
        super().__init__(
            code="TRANSLATION_TRANSPORT_ERROR", message=message, status_code=504
        )


class TranslationParseError(TranslatorBotError):
    def __init__(self, message: str = "Translation response could not be parsed") -> None:
        super().__init__(
            code="TRANSLATION_PARSE_ERROR", message=message, status_code=502
        )


class ReplyDeliveryError(TranslatorBotError):
    def __init__(self, message: str = "Reply message could not be delivered") -> None:
        super().__init__(code="REPLY_DELIVERY_FAILED", message=message, status_code=502)
