import logging
from typing import List

from sqlalchemy.orm import Session

from app.core.auth import CurrentUser
from app.core.exceptions import NotFoundError
from app.domain.quiz_domain import QuizDomain
from app.repositories.question_repository import QuestionRepository
from app.repositories.quiz_repository import QuizRepository
from app.schemas.quiz import (
    AttemptDetailResponse,
    AttemptSummaryResponse,
    QuestionSetDetailResponse,
    QuestionSetResponse,
)

logger = logging.getLogger(__name__)


class QuizQueryService:
    """Read paths for question sets and attempts"""

    def __init__(self, db: Session):
        self.db = db
        self.question_repository = QuestionRepository(db)
        self.quiz_repository = QuizRepository(db)

    def list_question_sets(self) -> List[QuestionSetResponse]:
        return [
            QuizDomain.to_question_set_response(question_set)
            for question_set in self.question_repository.get_all_sets()
        ]

    def get_question_set_detail(self, question_set_id: str) -> QuestionSetDetailResponse:
        """Set plus its questions, with correct answers redacted"""
        question_set = self.question_repository.get_set_by_id(question_set_id)
        if question_set is None:
            logger.warning(f"Question set {question_set_id} not found")
            raise NotFoundError("Question set not found")
        questions = self.question_repository.get_by_set_id(question_set_id)
        return QuizDomain.to_question_set_detail(question_set, questions)

    def list_my_attempts(self, user: CurrentUser) -> List[AttemptSummaryResponse]:
        return [
            QuizDomain.to_summary(attempt, set_name)
            for attempt, set_name in self.quiz_repository.get_attempts_with_set_name(user.id)
        ]

    def get_attempt_detail(self, user: CurrentUser, attempt_id: str) -> AttemptDetailResponse:
        """Owner-only review of an attempt, correct answers included"""
        row = self.quiz_repository.get_owned_attempt_with_set_name(attempt_id, user.id)
        if row is None:
            logger.warning(f"Attempt {attempt_id} not found for user {user.id}")
            raise NotFoundError("Quiz attempt not found or access denied")
        attempt, set_name = row
        answers = self.quiz_repository.get_answers_with_question(attempt_id)
        return QuizDomain.to_attempt_detail(attempt, set_name, answers)
