"""
Runtime settings.

Every key is read from the environment or a local `.env` file, using the
upper-case names documented in `.env.example`. Related keys are also exposed
as small grouped models (`settings.cors`, `settings.uploads`, `settings.logging`).
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        alias="SWF_LOG_LEVEL",
        description="Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str = Field(default="detailed", alias="LOG_FORMAT", description="Log line format (simple, detailed, json)")
    file_dir: str = Field(default="logs", alias="LOG_FILE_DIR", description="Directory for the log file")
    enable_file: bool = Field(default=False, alias="ENABLE_FILE_LOGGING", description="Also write logs to a file")

    model_config = {"populate_by_name": True}


class UploadConfig(BaseModel):
    """Image upload configuration."""

    dir: str = Field(default="public/uploads", alias="UPLOADS_DIR", description="Directory that stores uploaded images")
    max_bytes: int = Field(
        default=5 * 1024 * 1024, alias="MAX_UPLOAD_BYTES", description="Maximum accepted image size in bytes"
    )
    public_base_url: Optional[str] = Field(
        default=None,
        alias="PUBLIC_BASE_URL",
        description="Absolute base URL for returned upload links (defaults to the request's base URL)",
    )

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """Flat settings, one field per environment variable.

    Field names are snake_case and aliases carry the environment names, so tests
    can build an instance with either.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="API server host address to bind to",
        alias="SWF_SERVER_HOST",
    )
    server_port: int = Field(
        default=4000,
        description="API server port number",
        alias="SWF_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SWF_LOG_LEVEL",
    )
    log_format: str = Field(default="detailed", alias="LOG_FORMAT")
    log_file_dir: str = Field(default="logs", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(default=False, alias="ENABLE_FILE_LOGGING")

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./database.db",
        description="Async SQLite connection URL for the application database",
        alias="DATABASE_URL",
    )

    # =====================================================================
    # Domain Configuration
    # =====================================================================
    invitation_ttl_days: int = Field(
        default=30,
        description="Number of days an invitation token stays valid",
        alias="INVITATION_TTL_DAYS",
    )
    enable_dev_reset: bool = Field(
        default=False,
        description="Expose the destructive database reset endpoint",
        alias="ENABLE_DEV_RESET",
    )

    # =====================================================================
    # Upload Configuration
    # =====================================================================
    uploads_dir: str = Field(default="public/uploads", alias="UPLOADS_DIR")
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, alias="MAX_UPLOAD_BYTES")
    public_base_url: Optional[str] = Field(default=None, alias="PUBLIC_BASE_URL")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def uploads(self) -> UploadConfig:
        """Get upload configuration from environment variables."""
        return UploadConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
