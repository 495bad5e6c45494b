"""Runtime configuration for MagicPet AI."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_API_KEY = "YOUR_OPENAI_API_KEY"


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="MAGICPET_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "magicpet-ai"
    log_level: str = "INFO"

    openai_api_key: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: str = "https://api.openai.com/v1"

    # Server-held secrets for the transcription proxy keep their deployment names.
    minimax_api_key: str | None = Field(default=None, validation_alias="MINIMAX_API_KEY")
    minimax_group_id: str | None = Field(default=None, validation_alias="MINIMAX_GROUP_ID")
    minimax_base_url: str = "https://api.minimax.chat/v1"
    minimax_model: str = "speech-01"

    request_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout applied to every outbound HTTP call.",
    )
    recognition_language: str = "en-US"
    listen_timeout_seconds: float | None = Field(
        default=15.0,
        description="Upper bound for one capture session; unset to wait indefinitely.",
    )
    phrase_time_limit_seconds: float = 5.0

    proxy_path: str = "/api/whisper"
    proxy_host: str = "127.0.0.1"
    proxy_port: int = 3000

    @property
    def completion_configured(self) -> bool:
        """True when a real chat-completion key is present."""
        key = (self.openai_api_key or "").strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


settings = Settings()
