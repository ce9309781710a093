from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application-level settings for the dashboard data layer.

    This is separate from invoice_dashboard.db.config.Settings, which focuses on
    the database connection.
    """

    # Paging and listing sizes
    INVOICES_PAGE_SIZE: int = Field(
        default=6, ge=1, description="Rows per page of the filtered invoices table."
    )
    LATEST_INVOICES_LIMIT: int = Field(
        default=5, ge=1, description="Number of rows in the latest invoices list."
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level name")

    # Environment label
    ENVIRONMENT: Optional[str] = Field(
        default=None, description="Environment label (dev/test/prod)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        """Accept log level names in any case."""
        if v is None:
            return "INFO"
        return str(v).strip().upper() or "INFO"


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """
    Return a new AppSettings instance populated from environment variables.

    Note:
      For simplicity we construct a new instance each time. Callers that need a
      stable value (such as the page size) should read it once and keep it.
    """
    return AppSettings()
