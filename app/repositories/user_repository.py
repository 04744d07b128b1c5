from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.models.auth import User, UserSession


class UserRepository:
    """Repository for User and login Session rows"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_username(self, username: str) -> Optional[User]:
        """Get a user by username"""
        return self.db.query(User).filter(User.username == username).first()

    def create(self, user_data: dict) -> User:
        """Stage a new user (caller commits)"""
        db_user = User(**user_data)
        self.db.add(db_user)
        self.db.flush()
        return db_user

    def get_session(self, session_id: str) -> Optional[UserSession]:
        return self.db.query(UserSession).filter(UserSession.id == session_id).first()

    def create_session(self, session_data: dict) -> UserSession:
        db_session = UserSession(**session_data)
        self.db.add(db_session)
        self.db.flush()
        return db_session

    def extend_session(self, user_session: UserSession, expires_at: datetime) -> UserSession:
        user_session.expires_at = expires_at
        self.db.flush()
        return user_session

    def delete_session(self, session_id: str) -> int:
        return (
            self.db.query(UserSession)
            .filter(UserSession.id == session_id)
            .delete(synchronize_session=False)
        )
