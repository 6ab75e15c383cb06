from functools import lru_cache

from passlib.context import CryptContext

from accounts_api.core.config import get_settings


@lru_cache
def get_password_context() -> CryptContext:
    """Build the argon2 context from settings once per process"""
    settings = get_settings()
    return CryptContext(
        schemes=["argon2"],
        default="argon2",
        argon2__time_cost=settings.ARGON2_TIME_COST,
        argon2__memory_cost=settings.ARGON2_MEMORY_COST,
        argon2__parallelism=settings.ARGON2_PARALLELISM,
        deprecated="auto",
    )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Raises ValueError when the stored hash is not a recognised format.
    """
    return get_password_context().verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    """Generate password hash"""
    return get_password_context().hash(password)
