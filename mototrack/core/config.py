from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "mototrack"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite+pysqlite:///./mototrack.db"

    JWT_SECRET: str = "change_me_jwt"
    JWT_TTL_MINUTES: int = 240
    UI_COOKIE_NAME: str = "mototrack_jwt"

    CORS_ORIGINS: str = "http://localhost:3000"

    # Pagination defaults shared by the REST and UI list endpoints
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 200

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
