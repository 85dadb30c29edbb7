# department_api/core/config.py
import os
from pydantic_settings import BaseSettings
from pydantic import validator
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from .env"""

    # === Application ===
    PROJECT_NAME: str = "Department API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "CRUD service for managing departments"
    API_PREFIX: str = ""
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # === Database ===
    DATABASE_URL: str = "sqlite+aiosqlite:///./departments.db"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 30
    DB_POOL_TIMEOUT: int = 60
    DB_POOL_RECYCLE: int = 3600
    DB_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    @validator("DATABASE_URL")
    def validate_database_url(cls, v):
        """Ensure database URL is safe for current environment"""
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env == "production" and "localhost" in v:
            raise ValueError("Production environment cannot use localhost database!")
        return v

    # === CORS ===
    ALLOWED_ORIGINS: List[str] = ["*"]
    ALLOWED_METHODS: List[str] = ["*"]
    ALLOWED_HEADERS: List[str] = ["*"]

    # === System ===
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Create a global settings instance
settings = Settings()
