from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Base
    APP_ENV: str = "dev"  # dev | staging | prod | test
    APP_NAME: str = "Schedule Handler API"
    APP_VERSION: str = "0.1.0"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Storage : sessions.json, users.json et uploads/
    DATA_PATH: str = "./data"
    MAX_UPLOAD_MB: int = 25

    # Users
    SEED_DEFAULT_USERS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def sessions_file(self) -> Path:
        return Path(self.DATA_PATH) / "sessions.json"

    @property
    def users_file(self) -> Path:
        return Path(self.DATA_PATH) / "users.json"

    @property
    def uploads_dir(self) -> Path:
        return Path(self.DATA_PATH) / "uploads"


@lru_cache
def get_settings() -> Settings:
    return Settings()
