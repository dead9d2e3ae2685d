"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Taskboard", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=True, alias="DEBUG")

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=5000, alias="API_PORT")
    api_reload: bool = Field(default=False, alias="API_RELOAD")
    cors_origins: List[str] = Field(default=["*"], alias="CORS_ORIGINS")

    # Storage backend: "mongodb" or "memory"
    storage_backend: str = Field(default="mongodb", alias="STORAGE_BACKEND")

    # MongoDB Settings
    mongodb_url: str = Field(default="mongodb://localhost:27017", alias="MONGODB_URL")
    mongodb_database: str = Field(default="taskboard", alias="MONGODB_DATABASE")
    mongodb_collection: str = Field(default="tasks", alias="MONGODB_COLLECTION")
    mongodb_root_user: Optional[str] = Field(default=None, alias="MONGODB_ROOT_USER")
    mongodb_root_password: Optional[str] = Field(
        default=None, alias="MONGODB_ROOT_PASSWORD"
    )
    mongodb_max_pool_size: int = Field(default=10, alias="MONGODB_MAX_POOL_SIZE")
    mongodb_min_pool_size: int = Field(default=1, alias="MONGODB_MIN_POOL_SIZE")
    mongodb_timeout_ms: int = Field(default=5000, alias="MONGODB_TIMEOUT_MS")

    # Pagination
    default_page_limit: int = Field(default=10, ge=1, alias="DEFAULT_PAGE_LIMIT")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")

    # Client
    client_base_url: str = Field(
        default="http://localhost:5000", alias="CLIENT_BASE_URL"
    )
    client_timeout: float = Field(default=10.0, alias="CLIENT_TIMEOUT")

    @property
    def mongodb_connection_url(self) -> str:
        """Construct MongoDB connection URL with authentication if credentials provided."""
        # Credentials already embedded in the URL win
        if "@" in self.mongodb_url:
            return self.mongodb_url

        if self.mongodb_root_user and self.mongodb_root_password:
            host_port = self.mongodb_url.replace("mongodb://", "").split("/")[0]
            return (
                f"mongodb://{self.mongodb_root_user}:{self.mongodb_root_password}"
                f"@{host_port}/{self.mongodb_database}"
                f"?authSource={self.mongodb_database}"
            )

        return self.mongodb_url

    @property
    def masked_mongodb_url(self) -> str:
        """Connection URL with the password replaced, safe for logs."""
        url = self.mongodb_connection_url
        if "@" not in url or "://" not in url:
            return url
        credentials, host = url.split("@", 1)
        protocol, user_info = credentials.split("://", 1)
        user = user_info.split(":")[0]
        return f"{protocol}://{user}:****@{host}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
