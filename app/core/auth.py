import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

import bcrypt
from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import APIKeyCookie
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db, transaction, utcnow
from app.models.auth import User, UserSession
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CurrentUser(BaseModel):
    """Identity resolved once per request and passed explicitly into services"""

    id: str
    username: str
    session_id: str


session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


# ============================================================================
# Passwords
# ============================================================================


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


# ============================================================================
# Sessions
# ============================================================================


def _session_ttl() -> timedelta:
    return timedelta(days=settings.SESSION_TTL_DAYS)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def generate_id() -> str:
    return secrets.token_hex(20)


def create_session(db: Session, user_id: str) -> UserSession:
    """Stage a new login session for the user (caller commits)"""
    repository = UserRepository(db)
    return repository.create_session(
        {"id": generate_id(), "user_id": user_id, "expires_at": utcnow() + _session_ttl()}
    )


def validate_session(
    db: Session, session_id: str
) -> Optional[Tuple[UserSession, User, bool]]:
    """
    Look up a session and its user.

    Returns None for unknown or expired sessions (expired ones are deleted).
    Otherwise returns (session, user, fresh) where fresh is True when the
    expiry was pushed out because less than half of the TTL was left.
    """
    repository = UserRepository(db)
    user_session = repository.get_session(session_id)
    if user_session is None:
        return None

    now = utcnow()
    expires_at = _as_utc(user_session.expires_at)
    if expires_at <= now:
        with transaction(db):
            repository.delete_session(session_id)
        logger.info(f"Expired session removed for user {user_session.user_id}")
        return None

    user = repository.get_by_id(user_session.user_id)
    if user is None:
        return None

    fresh = False
    if expires_at - now < _session_ttl() / 2:
        with transaction(db):
            repository.extend_session(user_session, now + _session_ttl())
        fresh = True
    return user_session, user, fresh


def invalidate_session(db: Session, session_id: str) -> None:
    with transaction(db):
        UserRepository(db).delete_session(session_id)


def set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=int(_session_ttl().total_seconds()),
        path="/",
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


# ============================================================================
# Dependencies
# ============================================================================


def get_current_user(
    response: Response,
    session_id: Optional[str] = Depends(session_cookie),
    db: Session = Depends(get_db),
) -> Optional[CurrentUser]:
    """Resolve the session cookie to a user, or None for anonymous callers"""
    if not session_id:
        return None

    result = validate_session(db, session_id)
    if result is None:
        clear_session_cookie(response)
        return None

    user_session, user, fresh = result
    if fresh:
        set_session_cookie(response, user_session.id)
    return CurrentUser(id=user.id, username=user.username, session_id=user_session.id)


def require_user(
    request: Request,
    user: Optional[CurrentUser] = Depends(get_current_user),
) -> CurrentUser:
    if user is None:
        headers = None
        if request.cookies.get(settings.SESSION_COOKIE_NAME):
            # Stale cookie: tell the browser to drop it along with the 401
            blank = Response()
            clear_session_cookie(blank)
            headers = {"set-cookie": blank.headers["set-cookie"]}
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized", headers=headers
        )
    return user
