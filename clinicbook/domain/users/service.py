"""User service - Business logic for the user directory"""

import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...models import ADMIN_ROLE, User
from ...security_utils import create_access_token
from ...shared.validators import validate_email
from .repository import UserRepository
from .schemas import UpdateResult, UserUpsert

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Normalize a path/query email or reject it with 400"""
    try:
        return validate_email(email)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


class UserService:
    """Service layer for user directory logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository()

    def upsert_user(self, email: str, data: UserUpsert) -> dict:
        """
        Insert the user when absent, merge profile fields when present.
        A fresh credential is issued either way.
        """
        email = normalize_email(email)
        logger.info(f"📥 Upserting user: {email}")
        profile = data.model_dump(exclude_none=True)

        try:
            result = self._apply_upsert(email, profile)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to upsert user {email}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save user") from e

        token = create_access_token(email)
        logger.info(
            f"✅ User {email} upserted (matched={result.matchedCount}, upserted={result.upsertedCount})"
        )
        return {"result": result, "token": token}

    def _apply_upsert(self, email: str, profile: dict) -> UpdateResult:
        user = self.repo.get_user_by_email(self.db, email)
        if user is None:
            try:
                self.repo.create_user(self.db, email, **profile)
                return UpdateResult(upsertedCount=1)
            except IntegrityError:
                # Another request created the same email between lookup and insert
                self.db.rollback()
                user = self.repo.get_user_by_email(self.db, email)
                if user is None:
                    raise

        modified = self.repo.update_user(self.db, user, **profile)
        return UpdateResult(matchedCount=1, modifiedCount=1 if modified else 0)

    def list_users(self) -> list[User]:
        """Get every user (unbounded)"""
        return self.repo.get_users(self.db)

    def make_admin(self, email: str) -> UpdateResult:
        """Grant the admin role to an existing user"""
        email = normalize_email(email)
        user = self.repo.get_user_by_email(self.db, email)
        if user is None:
            logger.warning(f"⚠️ Admin grant for unknown user {email}")
            return UpdateResult()

        try:
            modified = self.repo.update_user(self.db, user, role=ADMIN_ROLE)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to grant admin to {email}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update user role") from e

        logger.info(f"✅ Admin role granted to {email}")
        return UpdateResult(matchedCount=1, modifiedCount=1 if modified else 0)

    def is_admin(self, email: str) -> bool:
        """Report whether the email holds the admin role; a missing user is not an admin"""
        user = self.repo.get_user_by_email(self.db, email.strip().lower())
        if user is None:
            return False
        return user.role == ADMIN_ROLE
