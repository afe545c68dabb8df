"""Models package - Import all models for SQLAlchemy registration."""
from exercise_tracker.models.user import User
from exercise_tracker.models.exercise import Exercise

__all__ = [
    "User",
    "Exercise",
]
