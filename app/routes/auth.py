from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.core.auth import (
    CurrentUser,
    clear_session_cookie,
    get_current_user,
    require_user,
    set_session_cookie,
)
from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import AppError, to_http_exception
from app.schemas.auth import LoginForm, UserResponse
from app.schemas.common import MessageResponse, SuccessResponse
from app.services.auth import AuthService

router = APIRouter(tags=["auth"])


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def signup(
    form: Annotated[LoginForm, Form()],
    response: Response,
    db: Session = Depends(get_db),
):
    """Create an account and start a session for it"""
    try:
        user_session = AuthService(db).signup(form)
    except AppError as e:
        raise to_http_exception(e)

    set_session_cookie(response, user_session.id)
    return MessageResponse(message="User created")


@router.post("/login", response_model=MessageResponse, status_code=status.HTTP_200_OK)
def login(
    form: Annotated[LoginForm, Form()],
    response: Response,
    db: Session = Depends(get_db),
):
    try:
        user_session = AuthService(db).login(form)
    except AppError as e:
        raise to_http_exception(e)

    set_session_cookie(response, user_session.id)
    return MessageResponse(message="Logged in")


@router.get("/logout")
def logout(
    request: Request,
    user: Optional[CurrentUser] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """End the current session (if any) and send the browser home"""
    redirect = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    if user is not None:
        AuthService(db).logout(user)
    if user is not None or request.cookies.get(settings.SESSION_COOKIE_NAME):
        clear_session_cookie(redirect)
    return redirect


@router.get(
    "/user",
    response_model=SuccessResponse[UserResponse],
    status_code=status.HTTP_200_OK,
)
def get_user(user: CurrentUser = Depends(require_user), db: Session = Depends(get_db)):
    """Username plus quiz totals of the logged-in user"""
    try:
        data = AuthService(db).get_user(user)
    except AppError as e:
        raise to_http_exception(e)
    return SuccessResponse[UserResponse](message="User fetched", data=data)
