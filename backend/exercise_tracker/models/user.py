"""
User model; the username doubles as the public user id.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from exercise_tracker.db.base import BaseModel


USERNAME_MAX_LENGTH = 100


class User(BaseModel):
    """User model with immutable username."""
    __tablename__ = "users"

    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)

    # Relationships
    exercises = relationship(
        "Exercise",
        back_populates="user",
        order_by="Exercise.id",
        cascade="all, delete-orphan",
    )
