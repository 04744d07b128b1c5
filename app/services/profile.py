import logging
import uuid

from sqlalchemy.orm import Session

from app.models.profile import UserProfile
from app.repositories.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Keeps each user's running quiz totals"""

    def __init__(self, db: Session):
        self.db = db
        self.profile_repository = ProfileRepository(db)

    def record_completion(self, user_id: str, score: int) -> UserProfile:
        """
        Count one more completed quiz and raise the highest score if beaten.

        Creates the profile on first completion. Does not commit: it must run
        inside the same transaction as the attempt's completion write.
        """
        profile = self.profile_repository.get_by_user_id(user_id)
        if profile is None:
            logger.info(f"Creating profile on first completion for user {user_id}")
            return self.profile_repository.create(
                {
                    "id": str(uuid.uuid4()),
                    "user_id": user_id,
                    "total_quizzes_taken": 1,
                    "highest_score": score,
                }
            )

        return self.profile_repository.update(
            profile,
            {
                "total_quizzes_taken": (profile.total_quizzes_taken or 0) + 1,
                "highest_score": max(profile.highest_score or 0, score),
            },
        )
