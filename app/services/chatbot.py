import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.auth import CurrentUser
from app.core.database import transaction, utcnow
from app.repositories.chat_repository import ChatRepository
from app.schemas.chatbot import ChatHistoryItem, ChatMessageForm, ChatReply
from app.services.llm import ChatCompletionClient

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ChatbotService:
    def __init__(self, db: Session, client: Optional[ChatCompletionClient] = None):
        self.db = db
        self.chat_repository = ChatRepository(db)
        self.client = client or ChatCompletionClient()

    def post_completion(self, user: CurrentUser, message: ChatMessageForm) -> ChatReply:
        """
        Forward one message to the completion provider and store the exchange.

        The user message is stamped with the time it reached the server, the
        assistant message and session with the provider's reported time. If
        the provider call fails no transaction is opened.
        """
        received_at = utcnow()
        completion = self.client.create([{"role": message.role, "content": message.content}])

        with transaction(self.db):
            self.chat_repository.create_session(
                {"id": completion.id, "user_id": user.id, "created_at": completion.created}
            )
            self.chat_repository.create_messages(
                [
                    {
                        "id": str(uuid.uuid4()),
                        "chat_session_id": completion.id,
                        "role": message.role,
                        "content": message.content,
                        "created_at": received_at,
                    },
                    {
                        "id": str(uuid.uuid4()),
                        "chat_session_id": completion.id,
                        "role": "assistant",
                        "content": completion.content,
                        "created_at": completion.created,
                    },
                ]
            )

        logger.info(f"Chat completion {completion.id} stored for user {user.id}")
        return ChatReply(role="assistant", content=completion.content)

    def get_history(self, user: CurrentUser) -> List[ChatHistoryItem]:
        """All of the user's messages across sessions, oldest first"""
        return [
            ChatHistoryItem(
                id=message.id,
                session_id=message.chat_session_id,
                role=message.role,
                content=message.content,
                created_at=message.created_at,
            )
            for message in self.chat_repository.get_history_by_user_id(user.id)
        ]
