# sdk/config.py
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    api_base_url: str = "http://127.0.0.1:8085/api"
    # None leaves timeouts to the transport
    request_timeout: Optional[float] = None
    log_level: str = "WARNING"
    server_host: str = "127.0.0.1"
    server_port: int = 8085

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
