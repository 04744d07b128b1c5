from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func
from sqlalchemy.types import JSON, DateTime

from app.core.database import Base, utcnow


class QuestionSet(Base):
    __tablename__ = "question_set"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)  # e.g. "AI Ethics Level 1"
    level = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
    )


class Question(Base):
    __tablename__ = "question"

    id = Column(String(255), primary_key=True)
    question_set_id = Column(
        String(255), ForeignKey("question_set.id"), nullable=False, index=True
    )
    type = Column(String(50), nullable=False)  # 'single_selection' or 'true_false'
    content = Column(Text, nullable=False)
    # Ordered option texts for single_selection, null for true_false
    options = Column(JSON, nullable=True)
    # Text of the correct option, or 'true'/'false'
    correct_answer = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )


class QuizAttempt(Base):
    __tablename__ = "quiz_attempt"

    id = Column(String(255), primary_key=True)
    user_id = Column(String(255), ForeignKey("user.id"), nullable=False, index=True)
    question_set_id = Column(
        String(255), ForeignKey("question_set.id"), nullable=False, index=True
    )
    score = Column(Integer, nullable=False, default=0)
    total_questions = Column("total_question", Integer, nullable=False)
    started_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    completed_at = Column(DateTime(timezone=True), nullable=True)


class QuizAnswer(Base):
    __tablename__ = "quiz_answer"

    id = Column(String(255), primary_key=True)
    quiz_attempt_id = Column(
        String(255), ForeignKey("quiz_attempt.id"), nullable=False, index=True
    )
    question_id = Column(String(255), ForeignKey("question.id"), nullable=False, index=True)
    user_answer = Column(Text, nullable=False)
    is_correct = Column(Boolean, nullable=False)
    answered_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
