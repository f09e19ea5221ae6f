"""Webhook event processing.

Use explicit imports:
    from app.services.webhook.handler import WebhookHandler
"""
