"""
User registration routes.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from exercise_tracker.db.session import get_db
from exercise_tracker.schemas.user import NewUserRequest, NewUserResponse
from exercise_tracker.services.user_service import create_user
from exercise_tracker.api.dependencies import read_body, validate_payload

router = APIRouter(prefix="/exercise", tags=["users"])


@router.post("/new-user", response_model=NewUserResponse, status_code=status.HTTP_201_CREATED)
async def new_user(request: Request, db: Session = Depends(get_db)):
    """Register a new user; the username is returned as the userId."""
    user_data = validate_payload(NewUserRequest, await read_body(request))

    user = create_user(user_data.username, db)

    return NewUserResponse(username=user.username, user_id=user.username)
