from typing import Optional

from sqlalchemy.orm import Session

from app.models.profile import UserProfile


class ProfileRepository:
    """Repository for UserProfile aggregate rows"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        """Get the profile belonging to a user"""
        return self.db.query(UserProfile).filter(UserProfile.user_id == user_id).first()

    def create(self, profile_data: dict) -> UserProfile:
        """Stage a new profile (caller commits)"""
        db_profile = UserProfile(**profile_data)
        self.db.add(db_profile)
        self.db.flush()
        return db_profile

    def update(self, profile: UserProfile, update_data: dict) -> UserProfile:
        """Apply field updates to a profile (caller commits)"""
        for field, value in update_data.items():
            setattr(profile, field, value)
        self.db.flush()
        return profile
