import os
from typing import List
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class AppConfig(BaseModel):
    title: str = os.getenv("APP_TITLE", "Rentcycle")
    env: str = os.getenv("ENV", "development")
    port: int = int(os.getenv("PORT", "3001"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    cors_origins: List[str] = Field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*")))

    @property
    def is_production(self) -> bool:
        return self.env == "production"


def get_config() -> AppConfig:
    return AppConfig()
