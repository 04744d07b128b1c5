from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.types import DateTime

from app.core.database import Base, utcnow


class ChatSession(Base):
    """Groups the user/assistant message pair produced by one completion call"""

    __tablename__ = "chat_session"

    id = Column(String(255), primary_key=True)  # provider completion id
    user_id = Column(String(255), ForeignKey("user.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)


class ChatMessage(Base):
    __tablename__ = "chat_message"

    id = Column(String(255), primary_key=True)
    chat_session_id = Column(
        String(255), ForeignKey("chat_session.id"), nullable=False, index=True
    )
    role = Column("sender", String(50), nullable=False)  # 'user' or 'assistant'
    content = Column(Text, nullable=False)
    created_at = Column("sent_at", DateTime(timezone=True), default=utcnow, nullable=False)
