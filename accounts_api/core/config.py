from functools import lru_cache
from os import getenv

from pydantic_settings import BaseSettings, SettingsConfigDict

# Get DB config from environment
DB_USER = getenv("DB_USER", "postgres")
DB_PASSWORD = getenv("DB_PASSWORD", "postgres")
DB_HOST = getenv("DB_HOST", "localhost")
DB_PORT = getenv("DB_PORT", "5432")
DB_NAME = getenv("DB_NAME", "postgres")

# Build PostgreSQL URL
POSTGRES_URL = f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(arbitrary_types_allowed=True)

    # Database settings
    DATABASE_URL: str = getenv("DATABASE_URL", POSTGRES_URL)
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_ECHO_LOG: bool = False

    # Profile field limits
    STATUS_DESCRIPTION_MAX_LENGTH: int = 32
    BIO_MAX_LENGTH: int = 512

    # Password hashing
    ARGON2_TIME_COST: int = 3
    ARGON2_MEMORY_COST: int = 65536
    ARGON2_PARALLELISM: int = 4


@lru_cache
def get_settings() -> Settings:
    """
    Cache and return settings instance
    """
    return Settings()
