"""
Exercise model for a single logged activity.
"""
from sqlalchemy import Column, String, Float, Date, ForeignKey, Integer, Text, CheckConstraint
from sqlalchemy.orm import relationship
from exercise_tracker.db.base import BaseModel
from exercise_tracker.models.user import USERNAME_MAX_LENGTH


class Exercise(BaseModel):
    """Exercise entry owned by exactly one user."""
    __tablename__ = "exercises"
    __table_args__ = (
        CheckConstraint("length(description) > 0", name="ck_exercises_description_not_empty"),
    )

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    username = Column(String(USERNAME_MAX_LENGTH), nullable=False)  # Copy of the owner's username, exposed as userId
    description = Column(Text, nullable=False)
    duration = Column(Float, nullable=False)  # Minutes
    date = Column(Date, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="exercises")
