"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError
from typing import Optional
from exercise_tracker.models.user import USERNAME_MAX_LENGTH
from exercise_tracker.schemas.utils import blank_to_none


class NewUserRequest(BaseModel):
    """Schema for user creation."""
    username: Optional[str] = None

    @field_validator("username", mode="before")
    @classmethod
    def clean_username(cls, v):
        v = blank_to_none(v)
        if isinstance(v, str) and len(v) > USERNAME_MAX_LENGTH:
            raise PydanticCustomError(
                "string_too_long",
                "Username must be at most {max_length} characters",
                {"max_length": USERNAME_MAX_LENGTH},
            )
        return v

    @model_validator(mode="after")
    def check_required(self):
        if self.username is None:
            raise PydanticCustomError("missing_field", "You must provide an username")
        return self


class NewUserResponse(BaseModel):
    """Schema for the created user; userId is the username."""
    username: str
    user_id: str = Field(serialization_alias="userId")
