from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.types import DateTime

from app.core.database import Base


class User(Base):
    __tablename__ = "user"

    id = Column(String(255), primary_key=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)


class UserSession(Base):
    __tablename__ = "session"

    id = Column(String(255), primary_key=True)
    user_id = Column(String(255), ForeignKey("user.id"), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
