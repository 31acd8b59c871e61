"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL (accounts)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "internmatch_user"
    postgres_password: str = "password"
    postgres_db: str = "internmatch_db"
    # Full URL override, e.g. sqlite:// for local runs and tests
    database_url: Optional[str] = None

    # MongoDB (intern profiles, organization roles)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "internmatch_docs"

    # JWT Auth
    jwt_secret_key: str = "your-secret-key-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 7 * 24 * 60

    # Password hashing cost factor
    bcrypt_rounds: int = 12

    # Matching
    skill_match_mode: Literal["substring", "exact"] = "substring"
    max_cv_size_mb: int = 5

    # App
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    debug: bool = False

    @property
    def postgres_url(self) -> str:
        """Construct PostgreSQL connection URL"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
