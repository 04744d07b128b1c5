from typing import Annotated, List

from fastapi import APIRouter, Depends, Form, status
from sqlalchemy.orm import Session

from app.core.auth import CurrentUser, require_user
from app.core.database import get_db
from app.core.exceptions import AppError, to_http_exception
from app.schemas.chatbot import ChatHistoryItem, ChatMessageForm, ChatReply
from app.schemas.common import SuccessResponse
from app.services.chatbot import ChatbotService

router = APIRouter(tags=["chat"])


@router.post(
    "/completions",
    response_model=SuccessResponse[ChatReply],
    status_code=status.HTTP_200_OK,
)
def create_completion(
    message: Annotated[ChatMessageForm, Form()],
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Send a message to the LLM and store the exchange

    Both the user message and the assistant reply are saved under one chat
    session. If the provider fails nothing is saved.
    """
    try:
        data = ChatbotService(db).post_completion(user, message)
    except AppError as e:
        raise to_http_exception(e)
    return SuccessResponse[ChatReply](
        message="Successfully generate chat completions", data=data
    )


@router.get(
    "/history",
    response_model=SuccessResponse[List[ChatHistoryItem]],
    status_code=status.HTTP_200_OK,
)
def get_history(user: CurrentUser = Depends(require_user), db: Session = Depends(get_db)):
    data = ChatbotService(db).get_history(user)
    return SuccessResponse[List[ChatHistoryItem]](
        message="Successfully fetch chat history", data=data
    )
