"""User repository - Database operations for users"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import User


class UserRepository:
    """Repository for user database operations"""

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get a user by email, None when no record exists"""
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    def get_users(db: Session) -> list[User]:
        """Get every user"""
        return db.query(User).order_by(User.id).all()

    @staticmethod
    def create_user(db: Session, email: str, **user_data) -> User:
        """Create a new user"""
        user = User(email=email, **user_data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def update_user(db: Session, user: User, **updates) -> bool:
        """
        Merge the provided fields into a user.
        Returns True when at least one stored value changed.
        """
        modified = False
        for key, value in updates.items():
            if value is not None and hasattr(user, key) and getattr(user, key) != value:
                setattr(user, key, value)
                modified = True

        if modified:
            db.commit()
            db.refresh(user)
        return modified
