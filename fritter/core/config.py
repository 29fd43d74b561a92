from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List

class Settings(BaseSettings):
    # Basic settings
    PROJECT_NAME: str = "Fritter"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Database settings
    DATABASE_URL: str = "sqlite:///./fritter.db"

    # Session settings
    SECRET_KEY: str = "your-secret-key-here"  # Set a real key in production
    SESSION_COOKIE: str = "fritter_session"
    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    # Longest freet or quote body accepted
    MAX_CONTENT_LENGTH: int = 140

    class Config:
        case_sensitive = True
        env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
