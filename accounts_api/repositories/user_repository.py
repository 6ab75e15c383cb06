from sqlalchemy import or_
from sqlmodel import Session, select

from accounts_api.models.domain import User
from accounts_api.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User domain operations"""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def email_in_use(self, email: str) -> bool:
        """Whether any user has this address as confirmed or pending email"""
        statement = select(User.id).where(
            or_(User.email == email, User.pending_email == email)
        )
        return self.db.exec(statement).first() is not None
