from pydantic_settings import BaseSettings
from functools import lru_cache

class ClientSettings(BaseSettings):
    BASE_URL: str = "http://localhost:2022/api/v1/okai"
    TIMEOUT_SECONDS: float = 30.0
    VIDEO_POLL_INTERVAL_SECONDS: float = 2.0

    class Config:
        env_prefix = "OKAI_CLIENT_"
        env_file = ".env"
        extra = "ignore"

@lru_cache()
def get_client_settings():
    return ClientSettings()
