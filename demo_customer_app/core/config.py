from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings

from demo_customer_app import __version__


class Settings(BaseSettings):
    service_name: str = "demo-customer-app"
    service_version: str = __version__

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Разрешаем запросы с любых источников
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
