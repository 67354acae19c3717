from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List

class OkaiSettings(BaseSettings):
    DATABASE_URL: str
    DATABASE_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 2022

    # Activity feed
    RECENT_ACTIVITIES_DEFAULT_LIMIT: int = 10

    # CORS settings
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = [
        "*",
        "Content-Type",
        "Authorization",
        "Accept",
        "Origin",
        "Cache-Control",
    ]

    class Config:
        env_prefix = "OKAI_"
        env_file = ".env"
        extra = "ignore"  # Ignore extra fields from .env

@lru_cache()
def get_okai_settings():
    return OkaiSettings()
