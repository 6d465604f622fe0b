"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LootLockerSettings(BaseModel):
    base_url: str = "https://api.lootlocker.io"
    api_version: str = "2021-03-01"
    timeout_seconds: float = Field(default=10.0, gt=0)


class ReplaySettings(BaseModel):
    # None keeps processed rounds for the lifetime of the process.
    retention_seconds: Optional[int] = Field(default=None, gt=0)


class Settings(BaseSettings):
    """Top-level relay settings.

    The LootLocker credentials and signing secret keep their flat environment
    names (``SERVER_API_KEY``, ``HMAC_SECRET`` ...); tuning knobs live in
    nested sections addressed with ``__`` (``LOOTLOCKER__BASE_URL``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    debug: bool = False
    project_name: str = "LootLocker Settlement Relay"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    server_api_key: str = ""
    game_version: str = "1.0.0.0"
    game_id: Optional[str] = None
    currency_id: str = ""
    hmac_secret: str = ""
    freshness_window_seconds: int = Field(default=30, ge=0)

    lootlocker: LootLockerSettings = LootLockerSettings()
    replay: ReplaySettings = ReplaySettings()

    @model_validator(mode="after")
    def _check_replay_retention(self) -> "Settings":
        retention = self.replay.retention_seconds
        if retention is not None and retention < 2 * self.freshness_window_seconds:
            raise ValueError(
                "replay.retention_seconds must be at least twice freshness_window_seconds"
            )
        return self

    @property
    def lootlocker_base_url(self) -> str:
        return self.lootlocker.base_url

    @property
    def lootlocker_api_version(self) -> str:
        return self.lootlocker.api_version

    @property
    def upstream_timeout(self) -> float:
        return self.lootlocker.timeout_seconds

    @property
    def replay_retention_seconds(self) -> Optional[int]:
        return self.replay.retention_seconds

    def missing_credentials(self) -> list[str]:
        """Names of required settings that are still empty."""
        required = {
            "SERVER_API_KEY": self.server_api_key,
            "CURRENCY_ID": self.currency_id,
            "HMAC_SECRET": self.hmac_secret,
        }
        return [name for name, value in required.items() if not value]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
