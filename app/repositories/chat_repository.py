from typing import List

from sqlalchemy.orm import Session

from app.models.chat import ChatMessage, ChatSession


class ChatRepository:
    """Repository for ChatSession and ChatMessage rows"""

    def __init__(self, db: Session):
        self.db = db

    def create_session(self, session_data: dict) -> ChatSession:
        """Stage a new chat session (caller commits)"""
        db_session = ChatSession(**session_data)
        self.db.add(db_session)
        self.db.flush()
        return db_session

    def create_messages(self, message_data_list: List[dict]) -> List[ChatMessage]:
        """Stage several messages at once (caller commits)"""
        db_message_list = [ChatMessage(**data) for data in message_data_list]
        self.db.add_all(db_message_list)
        self.db.flush()
        return db_message_list

    def get_history_by_user_id(self, user_id: str) -> List[ChatMessage]:
        """
        Get every message across all of a user's sessions in one joined query,
        flattened and ordered by creation time.
        """
        return (
            self.db.query(ChatMessage)
            .join(ChatSession, ChatMessage.chat_session_id == ChatSession.id)
            .filter(ChatSession.user_id == user_id)
            .order_by(ChatMessage.created_at, ChatMessage.id)
            .all()
        )
