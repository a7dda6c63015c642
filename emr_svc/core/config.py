"""
Configuration module for the EMR service.
Uses Pydantic BaseSettings for validation - the app fails fast on malformed config.
"""
import logging
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

AmbiguousDatePolicy = Literal["day_first", "month_first", "reject"]


class Settings(BaseSettings):
    """
    Application settings with validation.

    All fields have documented defaults so a bare checkout starts against a
    local SQLite file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database Configuration
    emr_db_url: str = Field(default="data/emr.db", description="SQLite database path (or ':memory:')")
    emr_db_user: str = Field(default="root", description="Database username")
    emr_db_password: str = Field(default="", description="Database password")

    # Stored date-of-birth decoding
    emr_ambiguous_dates: AmbiguousDatePolicy = Field(
        default="day_first",
        description="How to resolve slash dates valid as both MM/DD and DD/MM",
    )

    # API Configuration
    emr_svc_host: str = Field(default="0.0.0.0", description="API host")
    emr_svc_port: int = Field(default=8000, description="API port")
    emr_svc_reload: bool = Field(default=False, description="Enable hot reload")

    @model_validator(mode="after")
    def warn_on_credentials(self) -> "Settings":
        """SQLite has no authentication; say so once when credentials are supplied."""
        if self.emr_db_password:
            logger.warning(
                "EMR_DB_PASSWORD is set but the SQLite engine does not authenticate; "
                "the value is ignored"
            )
        return self

    @property
    def database_path(self) -> str:
        """Get the database path handed to sqlite3."""
        return self.emr_db_url


# Create global settings instance
settings = Settings()

# Backwards-compatible exports for existing code
DATABASE_PATH = settings.database_path
DATABASE_USER = settings.emr_db_user
DATABASE_PASSWORD = settings.emr_db_password
AMBIGUOUS_DATE_POLICY = settings.emr_ambiguous_dates

API_HOST = settings.emr_svc_host
API_PORT = settings.emr_svc_port
API_RELOAD = settings.emr_svc_reload
