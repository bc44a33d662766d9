"""Application configuration via environment variables."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Signing secret from the Clerk Dashboard (whsec_...). Overridden by
    # WebhookRegistrationConfig.secret when that is set.
    webhook_secret: str | None = Field(
        default=None,
        validation_alias=AliasChoices("WEBHOOK_SECRET", "CLERK_WEBHOOKS_WEBHOOK_SECRET"),
    )

    # Local development mode (console logs instead of JSON)
    local_mode: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"
    webhook_path: str = "/api/webhooks/clerk"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "CLERK_WEBHOOKS_",
        "extra": "ignore",
        "populate_by_name": True,
    }


settings = Settings()
