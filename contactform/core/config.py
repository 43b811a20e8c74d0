from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Contact Form Function"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Validation policy
    max_message_length: int = 2000

    # Spam heuristics
    spam_keywords: List[str] = ["bitcoin", "crypto", "investment", "loan", "casino", "gambling"]
    spam_phrases: List[str] = ["click here", "visit now", "act now", "limited time"]
    max_url_count: int = 3  # flagged at this many URLs or more
    repeated_char_threshold: int = 11

    # CORS settings
    cors_allow_origin: str = "*"
    cors_allow_methods: str = "POST, OPTIONS"
    cors_allow_headers: str = "Content-Type"
    cors_max_age: int = 86400


@lru_cache
def get_settings():
    return Settings()
