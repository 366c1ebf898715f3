from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = "photo2profit API"
    service_name: str = "photo2profit-api"
    version: str = "1.0.0"

    database_url: str = "sqlite:///./photo2profit.db"
    database_echo: bool = False

    stripe_secret_key: str | None = None
    stripe_api_base: str = "https://api.stripe.com/v1"
    stripe_timeout_seconds: float = 10.0

    # Serve the fixed analytics payload instead of querying payments
    analytics_use_mock: bool = False
    # Columns stripped from user records before they are returned
    user_hidden_fields: List[str] = []

    log_level: str = "INFO"
    log_file: str | None = None

    class Config:
        env_file = ".env"

settings = Settings()
