"""Shared pytest fixtures for the translator bot test suite.

Provides:
  - FakeProviders: an httpx.MockTransport handler standing in for both the
    DeepL translate endpoint and the LINE reply endpoint, recording every
    request it receives
  - fake_providers: a default FakeProviders instance
  - make_handler: builds a WebhookHandler wired to a FakeProviders
  - text_event / image_event / follow_event: webhook event dict builders

No test ever touches the network.
"""

from __future__ import annotations

import json
from typing import Any, Callable
from urllib.parse import parse_qs

import httpx
import pytest

from app.services.line.reply import LineReplyClient
from app.services.translation.deepl import DeepLClient
from app.services.webhook.handler import WebhookHandler

DEEPL_URL = "https://api-free.deepl.com/v2/translate"
LINE_BASE_URL = "https://api.line.me"
FALLBACK_TEXT = "文字情報を入力してください。"
ERROR_TEXT = "翻訳に失敗しました。"


def translation_body(*texts: str, detected: str = "EN") -> dict[str, Any]:
    """A DeepL success body with one segment per text."""
    return {
        "translations": [
            {"detected_source_language": detected, "text": t} for t in texts
        ]
    }


class FakeProviders:
    """MockTransport handler for DeepL + LINE with request recording."""

    def __init__(
        self,
        deepl_status: int = 200,
        deepl_content: bytes | None = None,
        line_status: int = 200,
    ) -> None:
        self.deepl_status = deepl_status
        self.deepl_content = (
            deepl_content
            if deepl_content is not None
            else json.dumps(translation_body("translated")).encode("utf-8")
        )
        self.line_status = line_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == DEEPL_URL:
            return httpx.Response(self.deepl_status, content=self.deepl_content)
        if request.url.path == "/v2/bot/message/reply":
            return httpx.Response(self.line_status, json={})
        return httpx.Response(404)

    @property
    def deepl_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == DEEPL_URL]

    @property
    def reply_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/v2/bot/message/reply"]

    def deepl_forms(self) -> list[dict[str, str]]:
        """Decoded form fields of every DeepL request, in order."""
        forms = []
        for r in self.deepl_requests:
            parsed = parse_qs(r.content.decode("utf-8"))
            forms.append({k: v[0] for k, v in parsed.items()})
        return forms

    def reply_payloads(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.reply_requests]

    def reply_texts(self) -> list[str]:
        return [p["messages"][0]["text"] for p in self.reply_payloads()]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def fake_providers() -> FakeProviders:
    return FakeProviders()


@pytest.fixture
def make_handler() -> Callable[..., WebhookHandler]:
    """Factory: WebhookHandler whose HTTP traffic goes to a FakeProviders."""

    def _make(
        providers: FakeProviders,
        reply_on_error: bool = False,
        separator: str = "-",
    ) -> WebhookHandler:
        http_client = providers.client()
        return WebhookHandler(
            translator=DeepLClient(
                http_client=http_client, auth_key="test-key", api_url=DEEPL_URL
            ),
            replier=LineReplyClient(
                http_client=http_client,
                channel_access_token="test-token",
                api_base_url=LINE_BASE_URL,
            ),
            fallback_reply_text=FALLBACK_TEXT,
            separator=separator,
            reply_on_error=reply_on_error,
            error_reply_text=ERROR_TEXT,
        )

    return _make


def text_event(text: str, reply_token: str = "reply-token-1") -> dict[str, Any]:
    return {
        "type": "message",
        "mode": "active",
        "timestamp": 1700000000000,
        "replyToken": reply_token,
        "source": {"type": "user", "userId": "U1234567890"},
        "message": {"type": "text", "id": "m-1", "text": text},
    }


def image_event(reply_token: str = "reply-token-img") -> dict[str, Any]:
    return {
        "type": "message",
        "mode": "active",
        "timestamp": 1700000000000,
        "replyToken": reply_token,
        "source": {"type": "user", "userId": "U1234567890"},
        "message": {"type": "image", "id": "m-2"},
    }


def follow_event() -> dict[str, Any]:
    return {
        "type": "follow",
        "mode": "active",
        "timestamp": 1700000000000,
        "replyToken": "reply-token-follow",
        "source": {"type": "user", "userId": "U1234567890"},
    }


def envelope(*events: dict[str, Any]) -> dict[str, Any]:
    return {"destination": "Uabcdef", "events": list(events)}
