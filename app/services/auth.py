import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth import (
    CurrentUser,
    create_session,
    hash_password,
    invalidate_session,
    verify_password,
)
from app.core.database import transaction
from app.core.exceptions import AppError, NotFoundError, UnauthenticatedError
from app.models.auth import UserSession
from app.repositories.profile_repository import ProfileRepository
from app.repositories.user_repository import UserRepository
from app.schemas.auth import LoginForm, ProfileResponse, UserResponse

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.user_repository = UserRepository(db)
        self.profile_repository = ProfileRepository(db)

    def signup(self, form: LoginForm) -> UserSession:
        """
        Create a user with an empty profile and log them in.

        User, profile and session are written in one transaction.
        """
        password_hash = hash_password(form.password)
        user_id = str(uuid.uuid4())

        try:
            with transaction(self.db):
                self.user_repository.create(
                    {"id": user_id, "username": form.username, "password_hash": password_hash}
                )
                self.profile_repository.create(
                    {
                        "id": str(uuid.uuid4()),
                        "user_id": user_id,
                        "total_quizzes_taken": 0,
                        "highest_score": 0,
                    }
                )
                user_session = create_session(self.db, user_id)
        except SQLAlchemyError:
            logger.exception(f"Failed to create user {form.username}")
            raise AppError("Failed to create user")

        logger.info(f"User created: {form.username}")
        return user_session

    def login(self, form: LoginForm) -> UserSession:
        user = self.user_repository.get_by_username(form.username)
        if user is None or not verify_password(form.password, user.password_hash):
            logger.warning(f"Failed login for username {form.username}")
            raise UnauthenticatedError("Invalid username or password", is_form_error=True)

        with transaction(self.db):
            user_session = create_session(self.db, user.id)
        return user_session

    def logout(self, user: CurrentUser) -> None:
        invalidate_session(self.db, user.session_id)
        logger.info(f"User logged out: {user.username}")

    def get_user(self, user: CurrentUser) -> UserResponse:
        profile = self.profile_repository.get_by_user_id(user.id)
        if profile is None:
            logger.warning(f"No profile for user {user.id}")
            raise NotFoundError("User not found")
        return UserResponse(
            username=user.username, profile=ProfileResponse.model_validate(profile)
        )
