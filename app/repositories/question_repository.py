from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.quiz import Question, QuestionSet


class QuestionRepository:
    """Repository for QuestionSet and Question rows (read-only at runtime)"""

    def __init__(self, db: Session):
        self.db = db

    def get_set_by_id(self, question_set_id: str) -> Optional[QuestionSet]:
        """Get a question set by ID"""
        return (
            self.db.query(QuestionSet).filter(QuestionSet.id == question_set_id).first()
        )

    def get_all_sets(self) -> List[QuestionSet]:
        """Get all question sets, oldest first"""
        return self.db.query(QuestionSet).order_by(QuestionSet.created_at).all()

    def count_by_set_id(self, question_set_id: str) -> int:
        """Count the questions currently in a set"""
        return (
            self.db.query(func.count(Question.id))
            .filter(Question.question_set_id == question_set_id)
            .scalar()
        )

    def get_by_id(self, question_id: str) -> Optional[Question]:
        """Get a question by ID"""
        return self.db.query(Question).filter(Question.id == question_id).first()

    def get_by_set_id(self, question_set_id: str) -> List[Question]:
        """Get all questions of a set in creation order"""
        return (
            self.db.query(Question)
            .filter(Question.question_set_id == question_set_id)
            .order_by(Question.created_at)
            .all()
        )
