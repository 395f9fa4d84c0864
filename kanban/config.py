"""Kanban service configuration settings."""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Database
    DATABASE_URL: Optional[str] = None

    # Application
    APP_NAME: str = "Kanban"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOGGING_CONFIG: str = "logging.conf"

    # Current user stand-in
    DEFAULT_USER_EMAIL: str = "default@kanban.local"
    DEFAULT_USER_NAME: str = "You"

    # Boards
    DEFAULT_COLUMNS: str = "To Do,In Progress,Done"

    # Comments
    COMMENT_PREVIEW_LENGTH: int = Field(default=100, ge=1)
    COMMENT_EDIT_TOLERANCE_SECONDS: float = Field(default=1.0, ge=0)

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @property
    def cors_origins_list(self) -> List[str]:
        """Return the configured CORS origins as a sanitized list."""

        if not self.CORS_ORIGINS:
            return []

        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def default_columns_list(self) -> List[str]:
        """Column names created with every new board, in display order."""

        return [name.strip() for name in self.DEFAULT_COLUMNS.split(",") if name.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
