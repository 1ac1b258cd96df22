from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./work_entries.db"
    database_echo: bool = False

    # Application
    app_env: str = "development"
    log_level: str = "INFO"
    logs_dir: str = "logs"
    # Rotated log files older than this are removed at startup
    log_retention_days: int = 30

    # CORS origins (comma-separated). "*" allows any origin.
    allowed_origins: str = "*"

    # Page size used when a listing request does not pass one
    default_page_size: int = 20

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def allowed_origins_list(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
