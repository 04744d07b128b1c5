from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import CamelModel

# ============================================================================
# Request Schemas
# ============================================================================


class AnswerRequest(CamelModel):
    question_id: str = Field(..., description="ID of the question being answered", min_length=1)
    user_answer: str = Field(
        ..., description="Option text for single_selection, 'true'/'false' for true_false"
    )


# ============================================================================
# Response Schemas
# ============================================================================


class QuestionSetResponse(CamelModel):
    id: str
    name: str
    level: int
    description: Optional[str] = None
    created_at: datetime


class QuestionSetInfoResponse(QuestionSetResponse):
    updated_at: datetime


class QuestionResponse(CamelModel):
    """A question as shown before answering; never carries the correct answer"""

    id: str
    question_set_id: str
    type: str
    content: str
    options: Optional[List[str]] = None
    created_at: datetime


class QuestionSetDetailResponse(CamelModel):
    question_set: QuestionSetInfoResponse
    questions: List[QuestionResponse]


class StartAttemptResponse(CamelModel):
    attempt_id: str
    total_questions: int


class AnswerResultResponse(CamelModel):
    was_correct: bool
    correct_answer: str = Field(..., description="Sent back for feedback")


class AttemptSnapshotResponse(CamelModel):
    attempt_id: str
    score: int
    total_questions: int
    started_at: datetime
    completed_at: Optional[datetime] = None


class AttemptSummaryResponse(AttemptSnapshotResponse):
    question_set_id: str
    question_set_name: Optional[str] = None


class AttemptAnswerResponse(CamelModel):
    """An answer reviewed after the fact, with the correct answer revealed"""

    question_id: str
    question_content: Optional[str] = None
    question_type: Optional[str] = None
    question_options: Optional[List[str]] = None
    user_answer: str
    is_correct: bool
    correct_answer: Optional[str] = None
    answered_at: datetime


class AttemptDetailResponse(CamelModel):
    id: str
    user_id: str
    question_set_id: str
    question_set_name: Optional[str] = None
    score: int
    total_questions: int
    started_at: datetime
    completed_at: Optional[datetime] = None
    answers: List[AttemptAnswerResponse]
