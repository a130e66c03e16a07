"""
Application configuration settings.
"""
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List
import os


# Placeholder admin secret. Anyone who knows it can read and delete every
# record, so deployments must set ADMIN_TOKEN explicitly.
DEFAULT_ADMIN_TOKEN = "changeme"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Admin access
    ADMIN_TOKEN: str = DEFAULT_ADMIN_TOKEN

    # Database - full URL override, otherwise a local SQLite file
    DATABASE_URL: str = ""
    DATABASE_PATH: str = "students.db"

    # Uploaded images and static files
    UPLOAD_DIR: str = "uploads"
    STATIC_DIR: str = "."  # empty string disables static serving
    MAX_UPLOAD_BYTES: int = 2 * 1024 * 1024  # 2 MiB

    # Rate limiting (limits-library notation, per client address)
    RATE_LIMIT: str = "50/minute"
    RATE_LIMIT_ENABLED: bool = True

    # API settings
    PROJECT_NAME: str = "Student Enrollment API"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]

    @property
    def database_url(self) -> str:
        """Get database URL - explicit override if configured, else SQLite."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATABASE_PATH}"

    @property
    def upload_path(self) -> Path:
        """Content directory as a Path."""
        return Path(self.UPLOAD_DIR)

    @property
    def uses_default_admin_token(self) -> bool:
        return self.ADMIN_TOKEN == DEFAULT_ADMIN_TOKEN

    class Config:
        env_file = ".env"
        extra = "allow"


# Global settings instance
settings = Settings()


def ensure_directories(app_settings: Settings) -> None:
    """Create the content directory and the SQLite file's parent if missing."""
    dirs = [app_settings.UPLOAD_DIR]
    if not app_settings.DATABASE_URL:
        parent = os.path.dirname(app_settings.DATABASE_PATH)
        if parent:
            dirs.append(parent)
    for dir_path in dirs:
        os.makedirs(dir_path, exist_ok=True)
