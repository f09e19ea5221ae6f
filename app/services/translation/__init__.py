"""Translation provider clients.

Use explicit imports:
    from app.services.translation.deepl import DeepLClient
"""
