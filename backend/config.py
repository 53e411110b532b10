# backend/config.py
from typing import List

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

# Values from a local .env file end up in os.environ before Settings reads them
load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str
    PORT: int = 10000

    # Browser origins allowed to call the API (requests without Origin are always allowed)
    ALLOWED_ORIGINS: List[str] = [
        "https://moslemerror-maker.github.io",
        "https://best-itasset.online",
        "https://www.best-itasset.online",
        "https://asset-app-backend-2tgc.onrender.com",
    ]

    # Account that can be neither edited nor deleted through the API
    PROTECTED_USERNAME: str = "admin"

    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    @field_validator("DATABASE_URL")
    @classmethod
    def normalize_postgres_scheme(cls, v: str) -> str:
        # SQLAlchemy only understands postgresql://
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v


settings = Settings()
