from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    IP_MESSAGING_BASE_URL: str = "https://ip-messaging.twilio.com/v1"
    IP_MESSAGING_ACCOUNT_SID: str = ""
    IP_MESSAGING_AUTH_TOKEN: str = ""
    IP_MESSAGING_TIMEOUT: float = 30.0

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
