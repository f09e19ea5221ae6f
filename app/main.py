"""FastAPI application entrypoint.

All routes prefixed /v1. LINE delivers webhooks to POST /v1/callback.

One httpx.AsyncClient is created during the lifespan and shared by the
DeepL and LINE clients; the WebhookHandler built on top of them is stored
on app.state for injection via Depends().
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1.callback import router as callback_router
from app.api.v1.health import router as health_router
from app.core.config import settings
from app.core.exceptions import TranslatorBotError
from app.services.line.reply import LineReplyClient
from app.services.translation.deepl import DeepLClient
from app.services.webhook.handler import WebhookHandler


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


def build_webhook_handler(http_client: httpx.AsyncClient) -> WebhookHandler:
    """Wire the DeepL and LINE clients from settings into a WebhookHandler."""
    translator = DeepLClient(
        http_client=http_client,
        auth_key=settings.deepl_auth_key,
        api_url=settings.deepl_api_url,
    )
    replier = LineReplyClient(
        http_client=http_client,
        channel_access_token=settings.line_channel_access_token,
        api_base_url=settings.line_api_base_url,
    )
    return WebhookHandler(
        translator=translator,
        replier=replier,
        fallback_reply_text=settings.fallback_reply_text,
        separator=settings.translation_separator,
        reply_on_error=settings.reply_on_error,
        error_reply_text=settings.error_reply_text,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle."""
    # --- Startup ---
    logger.info(
        "app_startup",
        env=settings.app_env,
        signature_verification=settings.verify_signatures,
    )
    http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    app.state.webhook_handler = build_webhook_handler(http_client)

    yield

    # --- Shutdown ---
    logger.info("app_shutdown")
    await http_client.aclose()


app = FastAPI(
    title="LINE DeepL Translator",
    description="Translates LINE text messages between Japanese and English with DeepL.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(TranslatorBotError)
async def translator_bot_error_handler(
    request: Request, exc: TranslatorBotError
) -> JSONResponse:
    """Structured error response for all translator bot exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


app.include_router(health_router, prefix="/v1")
app.include_router(callback_router, prefix="/v1")
