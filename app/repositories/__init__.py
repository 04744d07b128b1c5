from .chat_repository import ChatRepository
from .profile_repository import ProfileRepository
from .question_repository import QuestionRepository
from .quiz_repository import QuizRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "ProfileRepository",
    "QuestionRepository",
    "QuizRepository",
    "ChatRepository",
]
