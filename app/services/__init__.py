from .auth import AuthService
from .chatbot import ChatbotService
from .profile import ProfileService
from .quiz import QuizService
from .quiz_query import QuizQueryService

__all__ = ["AuthService", "ChatbotService", "ProfileService", "QuizService", "QuizQueryService"]
