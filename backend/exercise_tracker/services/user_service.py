"""
User service for registering and looking up users.
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from exercise_tracker.core.exceptions import NotFoundError, ValidationError
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


def get_user_by_username(username: str, db: Session) -> Optional[User]:
    """Get a user by username (the public userId)."""
    return db.query(User).filter(User.username == username).first()


def get_user_or_raise(username: str, db: Session) -> User:
    """Get a user by username or raise NotFoundError."""
    user = get_user_by_username(username, db)
    if not user:
        raise NotFoundError("User not found")
    return user


def create_user(username: str, db: Session) -> User:
    """Register a new user with a unique username."""
    if get_user_by_username(username, db):
        raise ValidationError("Username already exists")

    new_user = User(username=username)
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent insert of the same username
        db.rollback()
        logger.info(f"Duplicate username rejected by database: {username}")
        raise ValidationError("Username already exists") from e
    db.refresh(new_user)

    logger.info(f"Created user '{new_user.username}'")
    return new_user
