from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DATABASE_URL: str = "sqlite:///./workout-tracker.db"
    RUN_MIGRATIONS: bool = True

    # HTTP
    ALLOW_ORIGINS: str = "*"
    STATIC_FILES_DIR: str | None = None   # pre-built frontend bundle, optional
    API_VERSION: str = "dev"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOW_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()
