from typing import List, Optional, Tuple

from app.models.quiz import Question, QuestionSet, QuizAnswer, QuizAttempt
from app.schemas.quiz import (
    AttemptAnswerResponse,
    AttemptDetailResponse,
    AttemptSnapshotResponse,
    AttemptSummaryResponse,
    QuestionResponse,
    QuestionSetDetailResponse,
    QuestionSetInfoResponse,
    QuestionSetResponse,
)


class QuizDomain:
    """Conversions from quiz models to response schemas"""

    @staticmethod
    def to_question_set_response(question_set: QuestionSet) -> QuestionSetResponse:
        return QuestionSetResponse.model_validate(question_set)

    @staticmethod
    def to_question_set_detail(
        question_set: QuestionSet, questions: List[Question]
    ) -> QuestionSetDetailResponse:
        """
        Build the pre-answer view of a set.

        QuestionResponse has no correct_answer field, so it is dropped here
        even though the Question rows carry it.
        """
        return QuestionSetDetailResponse(
            question_set=QuestionSetInfoResponse.model_validate(question_set),
            questions=[QuestionResponse.model_validate(q) for q in questions],
        )

    @staticmethod
    def to_snapshot(attempt: QuizAttempt) -> AttemptSnapshotResponse:
        return AttemptSnapshotResponse(
            attempt_id=attempt.id,
            score=attempt.score,
            total_questions=attempt.total_questions,
            started_at=attempt.started_at,
            completed_at=attempt.completed_at,
        )

    @staticmethod
    def to_summary(attempt: QuizAttempt, set_name: Optional[str]) -> AttemptSummaryResponse:
        return AttemptSummaryResponse(
            attempt_id=attempt.id,
            question_set_id=attempt.question_set_id,
            question_set_name=set_name,
            score=attempt.score,
            total_questions=attempt.total_questions,
            started_at=attempt.started_at,
            completed_at=attempt.completed_at,
        )

    @staticmethod
    def to_answer_review(
        answer: QuizAnswer, question: Optional[Question]
    ) -> AttemptAnswerResponse:
        return AttemptAnswerResponse(
            question_id=answer.question_id,
            question_content=question.content if question else None,
            question_type=question.type if question else None,
            question_options=question.options if question else None,
            user_answer=answer.user_answer,
            is_correct=answer.is_correct,
            correct_answer=question.correct_answer if question else None,
            answered_at=answer.answered_at,
        )

    @staticmethod
    def to_attempt_detail(
        attempt: QuizAttempt,
        set_name: Optional[str],
        answers: List[Tuple[QuizAnswer, Optional[Question]]],
    ) -> AttemptDetailResponse:
        return AttemptDetailResponse(
            id=attempt.id,
            user_id=attempt.user_id,
            question_set_id=attempt.question_set_id,
            question_set_name=set_name,
            score=attempt.score,
            total_questions=attempt.total_questions,
            started_at=attempt.started_at,
            completed_at=attempt.completed_at,
            answers=[
                QuizDomain.to_answer_review(answer, question) for answer, question in answers
            ],
        )
