from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

from app.core.database import Base, utcnow


class UserProfile(Base):
    __tablename__ = "profile"

    id = Column(String(255), primary_key=True)
    user_id = Column(String(255), ForeignKey("user.id"), nullable=False, unique=True)
    total_quizzes_taken = Column(Integer, nullable=False, default=0)
    highest_score = Column(Integer, nullable=False, default=0)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
    )
