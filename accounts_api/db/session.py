from typing import Generator

from loguru import logger
from sqlmodel import Session, SQLModel, create_engine

from accounts_api.core.config import get_settings
from accounts_api.models.domain import User, World  # noqa: F401 registers tables

settings = get_settings()


def build_engine(database_url: str):
    """Create the SQLAlchemy engine, pooling only for server databases"""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=settings.DB_ECHO_LOG,
        )
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Enable connection health checks
        pool_size=settings.DB_POOL_SIZE,  # Number of connections to maintain
        max_overflow=settings.DB_MAX_OVERFLOW,  # Max extra connections when pool is full
        echo=settings.DB_ECHO_LOG,  # SQL query logging
    )


engine = build_engine(settings.DATABASE_URL)


def get_db() -> Generator[Session, None, None]:
    """Get a database session"""
    with Session(engine) as session:
        yield session


def create_db_and_tables() -> None:
    """Create database tables if they don't exist."""
    try:
        with engine.connect() as conn:
            existing_tables = engine.dialect.get_table_names(conn)
            logger.info(f"Existing tables: {existing_tables}")

        logger.info("Creating database tables...")
        SQLModel.metadata.create_all(engine)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database tables: {str(e)}")
        raise


if __name__ == "__main__":
    create_db_and_tables()
