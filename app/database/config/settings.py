from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    # PostgreSQL connection
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "campus_directory"

    # Full URL override, e.g. sqlite:///./dev.db
    SQLALCHEMY_DATABASE_URI: Optional[str] = None
    SQL_ECHO: bool = False

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Drop, recreate and seed all tables at startup (development only)
    RESET_ON_BOOT: bool = False

    @property
    def DATABASE_URL(self) -> str:
        if self.SQLALCHEMY_DATABASE_URI:
            return self.SQLALCHEMY_DATABASE_URI
        return (
            f"postgresql+psycopg2://"
            f"{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@"
            f"{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/"
            f"{self.POSTGRES_DB}"
        )

    @property
    def SERVER_URL(self) -> str:
        """Same server as DATABASE_URL, pointed at the maintenance database."""
        url = make_url(self.DATABASE_URL)
        return url.set(database="postgres").render_as_string(hide_password=False)

    @property
    def DATABASE_NAME(self) -> Optional[str]:
        return make_url(self.DATABASE_URL).database


@lru_cache
def get_settings() -> Settings:
    return Settings()
