"""
Configuration management using Pydantic Settings
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from project root
# config.py is at: backend/contact_app/core/config.py
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent.parent
_project_root = _backend_dir.parent
ENV_FILE = _project_root / ".env"
# Fallback: try in backend/ directory if not found in project root
if not ENV_FILE.exists():
    ENV_FILE = _backend_dir / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE, override=False)


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Contact App"
    app_env: str = Field(default="development", description="Application environment")
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=3000, ge=1, le=65535, description="API port")

    # Sessions / flash messages
    secret_key: str = Field(..., min_length=16, description="Secret key for signing session cookies")
    session_cookie: str = Field(default="contact_session", description="Session cookie name")
    session_max_age: int = Field(
        default=60,
        ge=1,
        description="Session lifetime in seconds (flash messages only live this long)"
    )

    # Validation
    phone_region: str = Field(
        default="ID",
        min_length=2,
        max_length=2,
        description="ISO 3166 region used to validate mobile phone numbers"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_sqlalchemy: bool = Field(default=False, description="Enable SQLAlchemy query logging")
    log_uvicorn_access: bool = Field(default=False, description="Enable Uvicorn access logging")
    log_module_levels: Optional[str] = Field(
        default=None,
        description='Module-specific log levels (JSON string, e.g., {"contact_app.services": "DEBUG"})'
    )
    log_format: str = Field(
        default="json",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )
    log_file_enabled: bool = Field(default=False, description="Enable file logging")
    log_file_path: str = Field(
        default="logs/contact_app.log",
        description="Path to log file (relative to project root)"
    )
    log_file_retention: int = Field(
        default=14,
        ge=1,
        description="Number of days to keep log files"
    )
    log_sensitive_data: bool = Field(
        default=False,
        description="Enable logging of sensitive data (secrets, cookies) - NOT RECOMMENDED"
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./contacts.db",
        description="SQLAlchemy database URL"
    )
    database_pool_size: int = Field(default=5, ge=1, description="Database pool size")
    database_max_overflow: int = Field(default=10, ge=0, description="Database max overflow")

    @field_validator("phone_region")
    @classmethod
    def upper_region(cls, v: str) -> str:
        """Region codes are matched upper-case by phonenumbers"""
        return v.upper()

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite"""
        return self.database_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
