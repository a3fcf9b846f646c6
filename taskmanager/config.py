"""
Task manager settings.
Values come from environment variables or a local ``.env`` file; list values
may be given as comma-separated strings.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root, one level above the package
PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]
DEFAULT_UPLOAD_EXTENSIONS = [
    ".pdf", ".png", ".jpg", ".jpeg", ".gif", ".txt", ".doc", ".docx", ".xls", ".xlsx", ".zip"
]
DEV_SECRET_PREFIX = "development-"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _normalize_extension(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"


class Settings(BaseSettings):
    """Runtime configuration for the API, database, tokens and uploads."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    environment: str = Field(default="development", description="development, testing or production")
    debug: bool = Field(default=False, description="Verbose logging, API docs and error tracebacks")

    # HTTP
    api_title: str = Field(default="Task Manager API")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api", description="Prefix shared by every route")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    cors_origins: str | List[str] = Field(default=",".join(DEFAULT_CORS_ORIGINS))
    cors_allow_credentials: bool = Field(default=True)

    # Persistence
    database_url: str = Field(default="sqlite:///./taskmanager.db", description="SQLAlchemy database URL")

    # Access tokens
    jwt_secret_key: str = Field(
        default=f"{DEV_SECRET_PREFIX}secret-key-change-in-production",
        description="HMAC key used to sign access tokens"
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_access_token_expire_minutes: int = Field(default=60 * 24, description="Token lifetime")

    # Attachments
    upload_dir: str = Field(default=str(PROJECT_ROOT / "uploads"), description="Where attachment files are written")
    max_upload_size_mb: int = Field(default=10)
    allowed_upload_extensions: str | List[str] = Field(default=",".join(DEFAULT_UPLOAD_EXTENSIONS))

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Accept a comma-separated string; blank means the local dev origins."""
        if not v:
            return list(DEFAULT_CORS_ORIGINS)
        return _split_csv(v) if isinstance(v, str) else v

    @field_validator("allowed_upload_extensions", mode="before")
    @classmethod
    def parse_upload_extensions(cls, v):
        """Accept ``pdf,.PNG`` style lists and normalize them to ``.pdf``, ``.png``."""
        if not v:
            return list(DEFAULT_UPLOAD_EXTENSIONS)
        items = _split_csv(v) if isinstance(v, str) else v
        return [_normalize_extension(ext) for ext in items]

    def _environment_is(self, name: str) -> bool:
        return self.environment.lower() == name

    @property
    def is_development(self) -> bool:
        return self._environment_is("development")

    @property
    def is_production(self) -> bool:
        return self._environment_is("production")

    @property
    def is_testing(self) -> bool:
        return self._environment_is("testing")

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    def validate_environment(self) -> None:
        """Refuse to run production with the development JWT secret."""
        if self.jwt_secret_key.startswith(DEV_SECRET_PREFIX):
            raise ValueError("Missing required environment variable: JWT_SECRET_KEY")


@lru_cache()
def get_settings() -> Settings:
    """Build the settings once per process; production also checks its secrets."""
    loaded = Settings()
    if loaded.is_production:
        loaded.validate_environment()
    return loaded


settings = get_settings()
