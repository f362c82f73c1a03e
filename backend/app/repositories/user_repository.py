"""User persistence."""
from typing import Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import ConflictError
from app.models.user import User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> Optional[User]:
        ...

    def create(self, username: str, password_hash: str) -> User:
        ...


class SqlUserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def create(self, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race on the unique username constraint
            self.db.rollback()
            raise ConflictError("Username already exists") from exc
        self.db.refresh(user)
        return user
