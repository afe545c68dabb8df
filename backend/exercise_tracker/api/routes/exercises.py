"""
Exercise log routes.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from typing import List
from exercise_tracker.core.utils import normalize_number
from exercise_tracker.db.session import get_db
from exercise_tracker.schemas.exercise import (
    AddExerciseRequest, AddExerciseResponse, ExerciseLogEntry, ExerciseLogQuery
)
from exercise_tracker.services.exercise_service import add_exercise, get_exercise_log
from exercise_tracker.services.user_service import get_user_or_raise
from exercise_tracker.api.dependencies import read_body, validate_payload

router = APIRouter(prefix="/exercise", tags=["exercises"])


@router.get("/log", response_model=List[ExerciseLogEntry])
async def get_log(request: Request, db: Session = Depends(get_db)):
    """Get a user's exercise log filtered by date range and limit."""
    query = validate_payload(ExerciseLogQuery, dict(request.query_params))

    user = get_user_or_raise(query.user_id, db)
    exercises = get_exercise_log(
        user,
        db,
        from_date=query.from_date,
        to_date=query.to_date,
        limit=query.limit
    )

    return [
        ExerciseLogEntry(
            user_id=exercise.username,
            description=exercise.description,
            duration=normalize_number(exercise.duration),
            date=exercise.date
        )
        for exercise in exercises
    ]


@router.post("/add", response_model=AddExerciseResponse, status_code=status.HTTP_201_CREATED)
async def add(request: Request, db: Session = Depends(get_db)):
    """Add an exercise to a user's log."""
    exercise_data = validate_payload(AddExerciseRequest, await read_body(request))

    user = get_user_or_raise(exercise_data.user_id, db)
    exercise = add_exercise(
        user,
        description=exercise_data.description,
        duration=exercise_data.duration,
        exercise_date=exercise_data.exercise_date,
        db=db
    )

    return AddExerciseResponse(
        username=user.username,
        description=exercise.description,
        duration=normalize_number(exercise.duration),
        date=exercise.date
    )
