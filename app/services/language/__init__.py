"""Language detection and translation direction routing.

Use explicit imports:
    from app.services.language.detection import contains_japanese_kana
    from app.services.language.routing import LanguagePair, route
"""
