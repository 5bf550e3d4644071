"""Service configuration using pydantic-settings."""

from functools import cached_property, lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApprovalConfiguration(BaseModel):
    """Approval workflow options, shared read-only by the review service."""

    model_config = ConfigDict(frozen=True)

    # Number of approvals at which a review flips to approved (inclusive)
    min_count: int = Field(ge=0)


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    approval_min_count: int = Field(default=3, ge=0)

    # Consumed by core.logger.configure_logging
    log_level: str = "INFO"
    log_format: str = ""  # "json" or "console"

    @cached_property
    def approval_configuration(self) -> ApprovalConfiguration:
        return ApprovalConfiguration(min_count=self.approval_min_count)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this in tests to reset settings between test cases.
    After clearing, the next get_settings() call will create
    a fresh Settings instance with current environment variables.

    Example:
        def test_something(monkeypatch):
            monkeypatch.setenv("APPROVAL_MIN_COUNT", "5")
            clear_settings_cache()
            settings = get_settings()  # Fresh instance
    """
    get_settings.cache_clear()
