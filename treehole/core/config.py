"""
Core configuration settings for the Treehole message board
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App Config
    APP_NAME: str = "Treehole"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Everything (API + static client) is served below this prefix
    PATH_PREFIX: str = "/treehole"

    # Database
    DATABASE_URL: str = "sqlite:///./treehole.db"
    DB_TIMEOUT: int = 30  # seconds to wait for the SQLite write lock

    # Display format for message timestamps (server local time)
    TIME_FORMAT: str = "%Y/%m/%d %H:%M:%S"

    # CORS
    CORS_ORIGINS: str = "*"

    @field_validator("PATH_PREFIX")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        """Force a single leading slash and no trailing slash"""
        value = value.strip().strip("/")
        if not value:
            raise ValueError("PATH_PREFIX must not be empty")
        return "/" + value

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS_ORIGINS string to list"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def api_prefix(self) -> str:
        return f"{self.PATH_PREFIX}/api"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Default settings instance; create_app() accepts an explicit one
settings = Settings()
