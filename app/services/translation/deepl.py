"""DeepL translation client.

Sends one form-encoded POST per message to the DeepL /v2/translate endpoint.
The direction comes from app.services.language.routing; this module never
decides it. There is no retry: the first failure is raised to the caller
and aborts the current webhook invocation.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Mapping

import httpx
import structlog
from pydantic import ValidationError

from app.core.exceptions import (
    TranslationParseError,
    TranslationProviderError,
    TranslationTransportError,
)
from app.schemas.translation import TranslationResult
from app.services.language.routing import LanguagePair

logger = structlog.get_logger(__name__)

KNOWN_ERRORS: Mapping[int, str] = MappingProxyType(
    {
        400: "Bad request. Please check error message and your parameters.",
        403: "Authorization failed. Please supply a valid auth_key parameter.",
        404: "The requested resource could not be found.",
        413: "The request size exceeds the limit.",
        414: (
            "The request URL is too long. You can avoid this error by using a "
            "POST request instead of a GET request, and sending the parameters "
            "in the HTTP body."
        ),
        429: "Too many requests. Please wait and resend your request.",
        456: "Quota exceeded. The character limit has been reached.",
        503: "Resource currently unavailable. Try again later.",
        529: "Too many requests. Please wait and resend your request.",
    }
)

_PARSE_CONTEXT = "(occurred while parse response)"


def _error_message_from_body(response: httpx.Response) -> str | None:
    """The provider's ``message`` field, or None if the body is not JSON.

    Bodies nested past the interpreter's recursion limit count as undecodable.
    """
    try:
        data = json.loads(response.content)
    except (ValueError, RecursionError):
        return None
    if isinstance(data, dict) and data.get("message") is not None:
        return str(data["message"])
    return None


def validate_response(response: httpx.Response) -> None:
    """Raise TranslationProviderError unless the status is 2xx.

    The error text is ``Invalid response [<status> <reason>]``, followed by the
    known explanation for that status (if any) and the provider's own
    ``message`` (if the body is JSON and carries one).
    """
    status = response.status_code
    if 200 <= status < 300:
        return

    reason = httpx.codes.get_reason_phrase(status)
    text = f"Invalid response [{status} {reason}]" if reason else f"Invalid response [{status}]"
    known = KNOWN_ERRORS.get(status)
    if known is not None:
        text += f" {known}"
    provider_message = _error_message_from_body(response)
    if provider_message is not None:
        text += f", {provider_message}"
    raise TranslationProviderError(text, provider_status=status)


def parse_response(response: httpx.Response) -> TranslationResult:
    """Decode a validated response body into a TranslationResult."""
    try:
        return TranslationResult.model_validate_json(response.content)
    except ValidationError as e:
        raise TranslationParseError(f"{e} {_PARSE_CONTEXT}") from e


class DeepLClient:
    """Thin wrapper around an httpx.AsyncClient for DeepL translate calls."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        auth_key: str,
        api_url: str = "https://api-free.deepl.com/v2/translate",
    ) -> None:
        self._http = http_client
        self._auth_key = auth_key
        self._api_url = api_url

    async def translate(self, text: str, pair: LanguagePair) -> TranslationResult:
        """Translate ``text`` in the direction given by ``pair``."""
        form = {
            "auth_key": self._auth_key,
            "text": text,
            "source_lang": pair.source,
            "target_lang": pair.target,
        }
        logger.debug(
            "translation_requested",
            direction=str(pair),
            text_len=len(text),
        )
        try:
            response = await self._http.post(self._api_url, data=form)
        except httpx.HTTPError as e:
            logger.error("translation_transport_failed", error=str(e))
            raise TranslationTransportError(
                f"Translation provider unreachable: {e}"
            ) from e

        try:
            validate_response(response)
        except TranslationProviderError as e:
            logger.error(
                "translation_failed",
                provider_status=e.provider_status,
                error=e.message,
            )
            raise

        result = parse_response(response)
        logger.info(
            "translation_ok",
            direction=str(pair),
            segments=len(result.translations),
        )
        return result
