from sqlmodel import Session

from accounts_api.models.domain import World
from accounts_api.repositories.base_repository import BaseRepository


class WorldRepository(BaseRepository[World]):
    """Repository for World lookups"""

    def __init__(self, db: Session):
        super().__init__(World, db)
