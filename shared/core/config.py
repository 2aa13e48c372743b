import os
from typing import List, Optional

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    DATA_DB_URL: Optional[str] = os.getenv("DATA_DB_URL")

    DB_USER: Optional[str] = os.getenv("DB_USER")
    DB_PASS: Optional[str] = os.getenv("DB_PASS")
    DB_HOST: Optional[str] = os.getenv("DB_HOST")
    DB_PORT: Optional[str] = os.getenv("DB_PORT")
    DB_NAME: Optional[str] = os.getenv("DB_NAME")

    # Business tier -> data tier
    DATA_SERVICE_URL: str = os.getenv("DATA_SERVICE_URL", "http://127.0.0.1:8001")
    DATA_SERVICE_TIMEOUT: float = float(os.getenv("DATA_SERVICE_TIMEOUT", 10))

    DEFAULT_MIN_STOCK: int = int(os.getenv("DEFAULT_MIN_STOCK", 10))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:8080")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()


def build_data_database_url(cfg: Settings) -> str:
    if cfg.DATA_DB_URL:
        return cfg.DATA_DB_URL
    if all([cfg.DB_USER, cfg.DB_PASS, cfg.DB_HOST, cfg.DB_PORT, cfg.DB_NAME]):
        return (
            f"postgresql+psycopg2://{cfg.DB_USER}:{cfg.DB_PASS}@{cfg.DB_HOST}:{cfg.DB_PORT}/{cfg.DB_NAME}"
        )
    return "sqlite:///./inventory.db"


DATA_DATABASE_URL = build_data_database_url(settings)
