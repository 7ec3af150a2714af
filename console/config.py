"""Application configuration via environment variables."""

import json
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # REST backend
    API_BASE_URL: str = "http://localhost:8080"
    API_TIMEOUT_SECONDS: float = 30.0
    # Empty scheme sends the raw token in the Authorization header
    API_AUTH_SCHEME: str = "Bearer"
    ERROR_BODY_LIMIT: int = 200

    # Session
    SESSION_FILE: str = ".console_session.json"
    LOGIN_PATH: str = "/login"
    LOGIN_RATE_LIMIT: str = "10/minute"

    # AI chat (OpenAI-compatible)
    CHAT_API_KEY: str = ""
    CHAT_API_BASE_URL: str = "https://api.deepseek.com"
    CHAT_MODEL: str = "deepseek-chat"
    CHAT_HISTORY_LIMIT: int = 10
    CHAT_TIMEOUT_SECONDS: float = 60.0

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: str = '["http://localhost:5173"]'

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS_ORIGINS JSON string into a list."""
        try:
            return json.loads(self.CORS_ORIGINS)
        except (json.JSONDecodeError, TypeError):
            return ["http://localhost:5173"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
