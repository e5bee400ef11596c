"""
Centralized application settings using Pydantic.

All environment variables are read once and validated. Values may also come
from a local ``.env`` file. Use ``get_settings()`` instead of scattered
``os.getenv()`` calls.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WEBHOOK_TEST_URL = (
    "https://cape-fear-automations.app.n8n.cloud/webhook-test/"
    "70729559-d618-4bbf-95ad-b4b3c88b645d"
)
DEFAULT_WEBHOOK_PRODUCTION_URL = (
    "https://cape-fear-automations.app.n8n.cloud/webhook/"
    "70729559-d618-4bbf-95ad-b4b3c88b645d"
)
MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class Settings(BaseSettings):
    """Upload form configuration."""

    model_config = SettingsConfigDict(
        env_prefix="INKFEATHER_",
        env_file=".env",
        extra="ignore",
    )

    APP_NAME: str = Field(default="Ink and Feather")
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=False)

    WEBHOOK_TEST_URL: str = Field(default=DEFAULT_WEBHOOK_TEST_URL)
    WEBHOOK_PRODUCTION_URL: str = Field(default=DEFAULT_WEBHOOK_PRODUCTION_URL)
    WEBHOOK_TARGET: Literal["production", "test"] = Field(default="production")
    # None disables the client-side timeout entirely
    WEBHOOK_TIMEOUT_SECONDS: float | None = Field(default=None)

    MAX_UPLOAD_BYTES: int = Field(default=MAX_UPLOAD_BYTES, gt=0)

    @property
    def webhook_url(self) -> str:
        """Resolve the endpoint the submit path posts to."""
        if self.WEBHOOK_TARGET == "test":
            return self.WEBHOOK_TEST_URL
        return self.WEBHOOK_PRODUCTION_URL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
