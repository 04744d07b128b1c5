from .auth import User, UserSession
from .chat import ChatMessage, ChatSession
from .profile import UserProfile
from .quiz import Question, QuestionSet, QuizAnswer, QuizAttempt

__all__ = [
    "User",
    "UserSession",
    "UserProfile",
    "QuestionSet",
    "Question",
    "QuizAttempt",
    "QuizAnswer",
    "ChatSession",
    "ChatMessage",
]
