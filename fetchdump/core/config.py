from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="FETCHDUMP_", extra="ignore"
    )

    # Request target used when none is given on the command line
    default_url: str = "https://graph.facebook.com/<account>"

    # HTTP transfer
    connect_timeout: float = Field(default=5.0, gt=0)
    verify_ssl: bool = True  # set False behind corporate SSL-inspection proxies

    # Logging
    log_level: str = "INFO"


settings = Settings()
