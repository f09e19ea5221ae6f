"""Application configuration via pydantic-settings.

Values are loaded from the .env file at the project root and from the
environment. The .env file takes precedence over OS-level environment
variables so stale system env vars never shadow the project config.
No hardcoded secrets anywhere.
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Resolve .env from project root (two levels up from this file: app/core/config.py → project root)
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Central application settings. .env file wins over OS env vars."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Override source priority: .env file > OS env vars > defaults."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)

    # --- LINE Messaging API ---
    line_channel_secret: str = ""
    line_channel_access_token: str = ""
    line_api_base_url: str = "https://api.line.me"

    # --- DeepL ---
    deepl_auth_key: str = ""
    deepl_api_url: str = "https://api-free.deepl.com/v2/translate"

    # --- HTTP ---
    http_timeout_seconds: float = 10.0

    # --- Replies ---
    fallback_reply_text: str = "文字情報を入力してください。"
    translation_separator: str = "-"
    reply_on_error: bool = False
    error_reply_text: str = "翻訳に失敗しました。しばらくしてから再度お試しください。"

    # --- App ---
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def verify_signatures(self) -> bool:
        """Signature checks are only possible once a channel secret is set."""
        return bool(self.line_channel_secret)


settings = Settings()
