"""Shared FastAPI dependencies.

The WebhookHandler (and the httpx client behind it) is created once during
the FastAPI lifespan and stored on app.state. Routes retrieve it via
Depends(), never by direct import, so tests can swap it out.
"""

from fastapi import Request

from app.core.config import Settings, settings
from app.services.webhook.handler import WebhookHandler


def get_settings() -> Settings:
    """Return the process-wide settings."""
    return settings


def get_webhook_handler(request: Request) -> WebhookHandler:
    """Return the singleton WebhookHandler from app.state."""
    return request.app.state.webhook_handler
