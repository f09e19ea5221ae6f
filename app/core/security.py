"""Webhook signature verification."""

import base64
import hashlib
import hmac


def compute_signature(body: bytes, channel_secret: str) -> str:
    """Base64 HMAC-SHA256 of the raw request body, keyed by the channel secret."""
    digest = hmac.new(
        channel_secret.encode("utf-8"), body, hashlib.sha256
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


def verify_signature(body: bytes, signature: str | None, channel_secret: str) -> bool:
    """Check an X-Line-Signature header against the raw body."""
    if not signature:
        return False
    expected = compute_signature(body, channel_secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
