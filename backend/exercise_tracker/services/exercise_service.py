"""
Exercise service for writing and querying a user's exercise log.
"""
import logging
from datetime import date
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from exercise_tracker.core.exceptions import InternalError
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


def get_exercise_log(
    user: User,
    db: Session,
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
    limit: Optional[int] = None
) -> List[Exercise]:
    """
    Get a user's exercises in creation order.

    ``from_date`` is inclusive, ``to_date`` is exclusive and ``limit`` caps
    the number of entries; each is skipped when None.
    """
    query = db.query(Exercise).filter(Exercise.user_id == user.id)

    if from_date is not None:
        query = query.filter(Exercise.date >= from_date)
    if to_date is not None:
        query = query.filter(Exercise.date < to_date)

    query = query.order_by(Exercise.id)
    if limit:
        query = query.limit(limit)

    return query.all()


def add_exercise(
    user: User,
    description: str,
    duration: float,
    exercise_date: Optional[date] = None,
    db: Session = None
) -> Exercise:
    """
    Create an exercise and append it to the owner's log.

    The insert and the link to the user are committed together, so a failure
    leaves neither behind.
    """
    new_exercise = Exercise(
        username=user.username,
        description=description,
        duration=duration,
        date=exercise_date or date.today()
    )
    user.exercises.append(new_exercise)

    try:
        db.flush()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Failed to store exercise for '{user.username}'", exc_info=True)
        raise

    if new_exercise.id is None:
        db.rollback()
        raise InternalError("Could not create exercise")

    db.commit()
    db.refresh(new_exercise)

    logger.info(f"Added exercise {new_exercise.id} for '{user.username}' on {new_exercise.date}")
    return new_exercise
