from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Root of the search API; requests go to {books_api_base_url}/volumes.
    books_api_base_url: str = "https://www.googleapis.com/books/v1"

    # Seconds before an upstream request is abandoned as a transport failure.
    request_timeout: float = 10.0

    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
