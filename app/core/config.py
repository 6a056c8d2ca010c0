"""
Configuration settings for the application.
"""
import logging
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with default values.
    Values can be overridden by environment variables or a .env file.
    """
    PROJECT_NAME: str = "Employee Records"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # CORS settings
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Request bodies above this size are rejected (50 MB)
    MAX_BODY_SIZE: int = 50 * 1024 * 1024

    # MongoDB settings
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        validation_alias=AliasChoices("ATLASDB_URL", "MONGODB_URL"),
    )
    MONGODB_DB: str = "employeeDB"

    # Logging settings
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Create settings instance
settings = Settings()


def print_config_info():
    """Log configuration information at startup."""
    logger.info(f"Project Name: {settings.PROJECT_NAME}")
    logger.info(f"MongoDB Database: {settings.MONGODB_DB}")
    logger.info(f"CORS Origins: {settings.BACKEND_CORS_ORIGINS}")
    logger.info(f"Max Body Size: {settings.MAX_BODY_SIZE} bytes")
    logger.info(f"Log Level: {settings.LOG_LEVEL}")
