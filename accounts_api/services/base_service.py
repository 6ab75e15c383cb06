from sqlmodel import Session


class BaseService:
    """Base service with common operations"""

    def __init__(self, db: Session):
        self.db = db
