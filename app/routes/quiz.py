from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.auth import CurrentUser, require_user
from app.core.database import get_db
from app.core.exceptions import AppError, to_http_exception
from app.schemas.common import SuccessResponse
from app.schemas.quiz import (
    AnswerRequest,
    AnswerResultResponse,
    AttemptDetailResponse,
    AttemptSnapshotResponse,
    AttemptSummaryResponse,
    QuestionSetDetailResponse,
    QuestionSetResponse,
    StartAttemptResponse,
)
from app.services.quiz import QuizService
from app.services.quiz_query import QuizQueryService

router = APIRouter(tags=["quiz"])


@router.post(
    "/{question_set_id}/start",
    response_model=SuccessResponse[StartAttemptResponse],
    status_code=status.HTTP_200_OK,
)
def start_quiz(
    question_set_id: str,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Start a new attempt on a question set

    The attempt's totalQuestions is the number of questions in the set right now;
    later changes to the set do not affect it.
    """
    try:
        data = QuizService(db).start_attempt(user, question_set_id)
    except AppError as e:
        raise to_http_exception(e)
    return SuccessResponse[StartAttemptResponse](
        message="Quiz started successfully", data=data
    )


@router.post(
    "/attempt/{attempt_id}/answer",
    response_model=SuccessResponse[AnswerResultResponse],
    status_code=status.HTTP_200_OK,
)
def submit_answer(
    attempt_id: str,
    request: AnswerRequest,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Answer one question of an in-progress attempt

    **Request Body Example:**
    ```json
    {
        "questionId": "0f3c...",
        "userAnswer": "true"
    }
    ```

    The response reveals the correct answer so the client can show feedback.
    """
    try:
        data = QuizService(db).submit_answer(user, attempt_id, request)
    except AppError as e:
        raise to_http_exception(e)
    return SuccessResponse[AnswerResultResponse](
        message="Answer submitted successfully", data=data
    )


@router.post(
    "/attempt/{attempt_id}/complete",
    response_model=SuccessResponse[AttemptSnapshotResponse],
    status_code=status.HTTP_200_OK,
)
def complete_quiz(
    attempt_id: str,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    try:
        data = QuizService(db).complete_attempt(user, attempt_id)
    except AppError as e:
        raise to_http_exception(e)
    return SuccessResponse[AttemptSnapshotResponse](
        message="Quiz completed successfully", data=data
    )


@router.get(
    "/sets",
    response_model=SuccessResponse[List[QuestionSetResponse]],
    status_code=status.HTTP_200_OK,
)
def list_question_sets(
    user: CurrentUser = Depends(require_user), db: Session = Depends(get_db)
):
    data = QuizQueryService(db).list_question_sets()
    return SuccessResponse[List[QuestionSetResponse]](
        message="Successfully fetched question sets", data=data
    )


@router.get(
    "/sets/{question_set_id}",
    response_model=SuccessResponse[QuestionSetDetailResponse],
    status_code=status.HTTP_200_OK,
)
def get_question_set(
    question_set_id: str,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """Question set with its questions; correct answers are never included"""
    try:
        data = QuizQueryService(db).get_question_set_detail(question_set_id)
    except AppError as e:
        raise to_http_exception(e)
    return SuccessResponse[QuestionSetDetailResponse](
        message="Successfully fetched question set details", data=data
    )


@router.get(
    "/attempts/my",
    response_model=SuccessResponse[List[AttemptSummaryResponse]],
    status_code=status.HTTP_200_OK,
)
def list_my_attempts(
    user: CurrentUser = Depends(require_user), db: Session = Depends(get_db)
):
    data = QuizQueryService(db).list_my_attempts(user)
    return SuccessResponse[List[AttemptSummaryResponse]](
        message="Successfully fetched your quiz attempts", data=data
    )


@router.get(
    "/attempts/{attempt_id}",
    response_model=SuccessResponse[AttemptDetailResponse],
    status_code=status.HTTP_200_OK,
)
def get_attempt(
    attempt_id: str,
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """Review an attempt you own, including each answer's correct answer"""
    try:
        data = QuizQueryService(db).get_attempt_detail(user, attempt_id)
    except AppError as e:
        raise to_http_exception(e)
    return SuccessResponse[AttemptDetailResponse](
        message="Successfully fetched quiz attempt details", data=data
    )
