from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models.user import User
from app.stores.base import StoreError


class SQLUserStore:
    def __init__(self, session: Session):
        self.session = session

    def get_user_by_email(self, email: str) -> Optional[User]:
        try:
            return self.session.exec(select(User).where(User.email == email)).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not look up user {email}: {e}") from e

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        try:
            return self.session.get(User, user_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not look up user {user_id}: {e}") from e

    def create_user(self, user: User) -> User:
        try:
            self.session.add(user)
            self.session.flush()
            self.session.refresh(user)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not create user {user.email}: {e}") from e
        return user
