import os
from typing import Generator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Override settings for testing before the package reads them
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_PARALLELISM"] = "1"

from accounts_api.core.security import hash_password  # noqa: E402
from accounts_api.models.domain import User, World  # noqa: E402
from accounts_api.models.types.developer_type import DeveloperType  # noqa: E402
from accounts_api.models.types.release_status import ReleaseStatus  # noqa: E402
from accounts_api.repositories.user_repository import UserRepository  # noqa: E402
from accounts_api.repositories.world_repository import WorldRepository  # noqa: E402
from accounts_api.services.profile_service import ProfileService  # noqa: E402

# Test user constants
TEST_USER_EMAIL = "test@example.com"
TEST_USER_USERNAME = "testuser"
TEST_USER_PASSWORD = "testpassword123"
TEST_USER_TAGS = ["system_trust_basic", "admin_featured", "language_eng", "show_status"]

STAFF_USER_EMAIL = "staff@example.com"
OTHER_USER_EMAIL = "other@example.com"

# In-memory database shared by every connection of the test engine
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def make_user(
    username: str = TEST_USER_USERNAME,
    email: str = TEST_USER_EMAIL,
    password: str = TEST_USER_PASSWORD,
    developer_type: DeveloperType = DeveloperType.NONE,
    tags: list[str] | None = None,
) -> User:
    """Build a user that is not attached to any session."""
    return User(
        username=username,
        email=email,
        hashed_password=hash_password(password),
        developer_type=developer_type,
        tags=list(tags) if tags is not None else [],
    )


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    with engine.begin() as conn:
        SQLModel.metadata.drop_all(conn)
        SQLModel.metadata.create_all(conn)

    with Session(engine) as session:
        yield session


@pytest.fixture
def user_repository(db: Session) -> UserRepository:
    return UserRepository(db)


@pytest.fixture
def world_repository(db: Session) -> WorldRepository:
    return WorldRepository(db)


@pytest.fixture
def profile_service(db: Session) -> ProfileService:
    """Create a ProfileService instance."""
    return ProfileService(db)


@pytest.fixture
def test_user() -> User:
    """A regular user outside the database."""
    return make_user(tags=TEST_USER_TAGS)


@pytest.fixture
def staff_user() -> User:
    """A staff user outside the database."""
    return make_user(
        username="staffuser",
        email=STAFF_USER_EMAIL,
        developer_type=DeveloperType.INTERNAL,
        tags=["admin_moderator"],
    )


@pytest.fixture
def test_user_in_db(user_repository: UserRepository) -> User:
    """Create a regular test user in the database."""
    return user_repository.create(make_user(tags=TEST_USER_TAGS))


@pytest.fixture
def staff_user_in_db(user_repository: UserRepository) -> User:
    """Create a staff user in the database."""
    return user_repository.create(
        make_user(
            username="staffuser",
            email=STAFF_USER_EMAIL,
            developer_type=DeveloperType.INTERNAL,
        )
    )


@pytest.fixture
def other_user_in_db(user_repository: UserRepository) -> User:
    """Create another regular user in the database."""
    return user_repository.create(
        make_user(username="otheruser", email=OTHER_USER_EMAIL)
    )


@pytest.fixture
def public_world_in_db(world_repository: WorldRepository, other_user_in_db: User) -> World:
    """Create a public world authored by the other user."""
    return world_repository.create(
        World(
            name="Public Plaza",
            author_id=other_user_in_db.id,
            release_status=ReleaseStatus.PUBLIC,
        )
    )


@pytest.fixture
def private_world_in_db(
    world_repository: WorldRepository, other_user_in_db: User
) -> World:
    """Create a private world authored by the other user."""
    return world_repository.create(
        World(
            name="Hidden Garden",
            author_id=other_user_in_db.id,
            release_status=ReleaseStatus.PRIVATE,
        )
    )


@pytest.fixture
def user_factory():
    """Factory building detached users with a hashed test password."""
    return make_user
