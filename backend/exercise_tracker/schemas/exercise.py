"""
Pydantic schemas for Exercise entity.
"""
import math
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError
from typing import Any, Optional, Union
from datetime import date
from exercise_tracker.core.utils import parse_date
from exercise_tracker.schemas.utils import blank_to_none

MAX_LIMIT = 2 ** 63 - 1


class AddExerciseRequest(BaseModel):
    """
    Schema for exercise creation.

    ``exercise_date`` is None when the client sent no date or one that is
    not a strict ``YYYY-MM-DD`` calendar date; the service then uses today.
    """
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    description: Optional[str] = None
    duration: Optional[float] = None
    exercise_date: Optional[date] = Field(default=None, alias="date")

    @field_validator("user_id", "description", mode="before")
    @classmethod
    def clean_text(cls, v):
        return blank_to_none(v)

    @field_validator("duration", mode="before")
    @classmethod
    def parse_duration(cls, v):
        v = blank_to_none(v)
        if v is None:
            return None
        try:
            number = float(v)
        except (TypeError, ValueError):
            number = None
        if number is None or isinstance(v, bool) or not math.isfinite(number):
            raise PydanticCustomError(
                "number_type",
                'Cast to Number failed for value "{value}" at path "duration"',
                {"value": v},
            )
        # A zero duration counts as not provided
        return number or None

    @field_validator("exercise_date", mode="before")
    @classmethod
    def parse_exercise_date(cls, v):
        return parse_date(v)

    @model_validator(mode="after")
    def check_required(self):
        if self.user_id is None or self.description is None or self.duration is None:
            raise PydanticCustomError(
                "missing_field", "UserId, description, duration not provided"
            )
        return self


class ExerciseLogQuery(BaseModel):
    """
    Query parameters for reading a user's exercise log.

    Dates that fail strict validation and non-positive or non-integer limits
    are dropped to None, which disables that filter.
    """
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    from_date: Optional[date] = Field(default=None, alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    limit: Optional[int] = None

    @field_validator("user_id", mode="before")
    @classmethod
    def clean_user_id(cls, v):
        return blank_to_none(v)

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def parse_bound(cls, v):
        return parse_date(v)

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, v):
        try:
            limit = int(str(v).strip())
        except (TypeError, ValueError):
            return None
        if limit <= 0:
            return None
        # Database drivers bind LIMIT as a signed 64-bit integer
        return min(limit, MAX_LIMIT)

    @model_validator(mode="after")
    def check_required(self):
        if self.user_id is None:
            raise PydanticCustomError("missing_field", "UserId not provided")
        return self


class ExerciseLogEntry(BaseModel):
    """Schema for one entry of the exercise log."""
    user_id: str = Field(serialization_alias="userId")
    description: str
    duration: Union[int, float]
    date: date


class AddExerciseResponse(BaseModel):
    """Schema for the created exercise."""
    username: str
    description: str
    duration: Union[int, float]
    date: date
