from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import and_
from sqlalchemy.orm import Session

from app.models.quiz import Question, QuestionSet, QuizAnswer, QuizAttempt


class QuizRepository:
    """Repository for QuizAttempt and QuizAnswer rows"""

    def __init__(self, db: Session):
        self.db = db

    def get_owned_attempt(self, attempt_id: str, user_id: str) -> Optional[QuizAttempt]:
        """
        Get an attempt only if it belongs to the user.

        Missing and foreign attempts both come back as None.
        """
        return (
            self.db.query(QuizAttempt)
            .filter(and_(QuizAttempt.id == attempt_id, QuizAttempt.user_id == user_id))
            .first()
        )

    def get_owned_attempt_with_set_name(
        self, attempt_id: str, user_id: str
    ) -> Optional[Tuple[QuizAttempt, Optional[str]]]:
        """Get an owned attempt together with its question set name"""
        return (
            self.db.query(QuizAttempt, QuestionSet.name)
            .outerjoin(QuestionSet, QuizAttempt.question_set_id == QuestionSet.id)
            .filter(and_(QuizAttempt.id == attempt_id, QuizAttempt.user_id == user_id))
            .first()
        )

    def get_attempts_with_set_name(
        self, user_id: str
    ) -> List[Tuple[QuizAttempt, Optional[str]]]:
        """Get every attempt of a user, oldest start first"""
        return (
            self.db.query(QuizAttempt, QuestionSet.name)
            .outerjoin(QuestionSet, QuizAttempt.question_set_id == QuestionSet.id)
            .filter(QuizAttempt.user_id == user_id)
            .order_by(QuizAttempt.started_at)
            .all()
        )

    def create_attempt(self, attempt_data: dict) -> QuizAttempt:
        """Stage a new attempt (caller commits)"""
        db_attempt = QuizAttempt(**attempt_data)
        self.db.add(db_attempt)
        self.db.flush()
        return db_attempt

    def increment_score(self, attempt_id: str) -> None:
        """Add one point in a single UPDATE so concurrent writers do not lose increments"""
        self.db.query(QuizAttempt).filter(QuizAttempt.id == attempt_id).update(
            {QuizAttempt.score: QuizAttempt.score + 1}, synchronize_session=False
        )

    def mark_completed(self, attempt_id: str, completed_at: datetime) -> bool:
        """
        Close an attempt that is still open.

        The completed_at IS NULL condition is part of the UPDATE itself, so of
        two racing writers only one gets a row back. Returns False when the
        attempt was already closed.
        """
        updated = (
            self.db.query(QuizAttempt)
            .filter(and_(QuizAttempt.id == attempt_id, QuizAttempt.completed_at.is_(None)))
            .update({QuizAttempt.completed_at: completed_at}, synchronize_session=False)
        )
        return updated == 1

    def lock_open_attempt(self, attempt_id: str) -> Optional[QuizAttempt]:
        """Re-read an attempt inside the current transaction, None once it is completed"""
        return (
            self.db.query(QuizAttempt)
            .filter(and_(QuizAttempt.id == attempt_id, QuizAttempt.completed_at.is_(None)))
            .with_for_update()
            .first()
        )

    def create_answer(self, answer_data: dict) -> QuizAnswer:
        """Stage a new answer (caller commits)"""
        db_answer = QuizAnswer(**answer_data)
        self.db.add(db_answer)
        self.db.flush()
        return db_answer

    def has_correct_answer(self, attempt_id: str, question_id: str) -> bool:
        """Whether the question was already answered correctly in this attempt"""
        return (
            self.db.query(QuizAnswer.id)
            .filter(
                and_(
                    QuizAnswer.quiz_attempt_id == attempt_id,
                    QuizAnswer.question_id == question_id,
                    QuizAnswer.is_correct.is_(True),
                )
            )
            .first()
            is not None
        )

    def get_answers_with_question(
        self, attempt_id: str
    ) -> List[Tuple[QuizAnswer, Optional[Question]]]:
        """Get the answers of an attempt joined with their questions, in answer order"""
        return (
            self.db.query(QuizAnswer, Question)
            .outerjoin(Question, QuizAnswer.question_id == Question.id)
            .filter(QuizAnswer.quiz_attempt_id == attempt_id)
            .order_by(QuizAnswer.answered_at)
            .all()
        )
