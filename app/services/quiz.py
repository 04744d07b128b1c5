import logging
import uuid

from sqlalchemy.orm import Session

from app.core.auth import CurrentUser
from app.core.database import transaction, utcnow
from app.core.exceptions import ForbiddenError, NotFoundError
from app.domain.question_domain import QuestionDomain
from app.domain.quiz_domain import QuizDomain
from app.models.quiz import QuizAttempt
from app.repositories.question_repository import QuestionRepository
from app.repositories.quiz_repository import QuizRepository
from app.schemas.quiz import (
    AnswerRequest,
    AnswerResultResponse,
    AttemptSnapshotResponse,
    StartAttemptResponse,
)
from app.services.profile import ProfileService

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class QuizService:
    """Attempt lifecycle: start, answer, complete"""

    def __init__(self, db: Session):
        self.db = db
        self.question_repository = QuestionRepository(db)
        self.quiz_repository = QuizRepository(db)
        self.profile_service = ProfileService(db)

    def _get_open_attempt(self, user: CurrentUser, attempt_id: str) -> QuizAttempt:
        attempt = self.quiz_repository.get_owned_attempt(attempt_id, user.id)
        if attempt is None:
            logger.warning(f"Attempt {attempt_id} not found for user {user.id}")
            raise NotFoundError("Quiz attempt not found or does not belong to user")
        if attempt.completed_at is not None:
            logger.warning(f"Attempt {attempt_id} is already completed")
            raise ForbiddenError("Quiz attempt has already been completed")
        return attempt

    def start_attempt(self, user: CurrentUser, question_set_id: str) -> StartAttemptResponse:
        """Open a new attempt, fixing total_questions to the set's current size"""
        question_set = self.question_repository.get_set_by_id(question_set_id)
        if question_set is None:
            logger.warning(f"Cannot start quiz: question set {question_set_id} not found")
            raise NotFoundError("Question set not found")

        total_questions = self.question_repository.count_by_set_id(question_set_id)
        if total_questions == 0:
            logger.warning(f"Cannot start quiz: question set {question_set_id} has no questions")
            raise NotFoundError("No questions found for this question set")

        attempt_id = str(uuid.uuid4())
        with transaction(self.db):
            self.quiz_repository.create_attempt(
                {
                    "id": attempt_id,
                    "user_id": user.id,
                    "question_set_id": question_set_id,
                    "score": 0,
                    "total_questions": total_questions,
                    "started_at": utcnow(),
                    "completed_at": None,
                }
            )

        logger.info(
            f"Quiz started: attempt {attempt_id} on set {question_set_id} "
            f"({total_questions} questions) by user {user.id}"
        )
        return StartAttemptResponse(attempt_id=attempt_id, total_questions=total_questions)

    def submit_answer(
        self, user: CurrentUser, attempt_id: str, request: AnswerRequest
    ) -> AnswerResultResponse:
        """
        Record and grade one answer.

        Every submission is stored, but a question only adds to the score the
        first time it is answered correctly within the attempt, so the score
        never exceeds total_questions.
        """
        attempt = self._get_open_attempt(user, attempt_id)

        question = self.question_repository.get_by_id(request.question_id)
        if question is None:
            logger.warning(f"Question {request.question_id} not found")
            raise NotFoundError("Question not found")
        if question.question_set_id != attempt.question_set_id:
            logger.warning(
                f"Question {question.id} is not part of set {attempt.question_set_id}"
            )
            raise ForbiddenError("Question does not belong to this quiz set")

        is_correct = QuestionDomain.grade(question, request.user_answer)
        already_scored = is_correct and self.quiz_repository.has_correct_answer(
            attempt_id, question.id
        )

        with transaction(self.db):
            # Completion may have landed since the attempt was read
            if self.quiz_repository.lock_open_attempt(attempt_id) is None:
                logger.warning(f"Attempt {attempt_id} was completed before the answer was stored")
                raise ForbiddenError("Quiz attempt has already been completed")
            self.quiz_repository.create_answer(
                {
                    "id": str(uuid.uuid4()),
                    "quiz_attempt_id": attempt_id,
                    "question_id": question.id,
                    "user_answer": request.user_answer,
                    "is_correct": is_correct,
                    "answered_at": utcnow(),
                }
            )
            if is_correct and not already_scored:
                self.quiz_repository.increment_score(attempt_id)

        if already_scored:
            logger.info(
                f"Repeat correct answer for question {question.id} in attempt {attempt_id} not scored"
            )
        return AnswerResultResponse(
            was_correct=is_correct, correct_answer=question.correct_answer
        )

    def complete_attempt(self, user: CurrentUser, attempt_id: str) -> AttemptSnapshotResponse:
        """Close the attempt and fold its score into the user's profile atomically"""
        attempt = self._get_open_attempt(user, attempt_id)

        with transaction(self.db):
            if not self.quiz_repository.mark_completed(attempt_id, utcnow()):
                logger.warning(f"Attempt {attempt_id} was completed by another request")
                raise ForbiddenError("Quiz attempt has already been completed")
            self.db.refresh(attempt)
            self.profile_service.record_completion(user.id, attempt.score)

        logger.info(
            f"Quiz completed: attempt {attempt_id} scored "
            f"{attempt.score}/{attempt.total_questions}"
        )
        return QuizDomain.to_snapshot(attempt)
