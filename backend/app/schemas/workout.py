"""Pydantic schemas for workout and set API operations."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.common import CamelModel


class WorkoutStartRequest(CamelModel):
    """Schema for starting a workout."""

    workout_date: Optional[date] = Field(None, description="Calendar date; defaults to today")


class WorkoutUpdateRequest(CamelModel):
    """Schema for changing a finished workout's date."""

    workout_date: date = Field(..., description="New calendar date")


class WorkoutResponse(BaseModel):
    """Schema for workout API responses."""

    id: int = Field(..., description="Unique workout ID")
    user_id: int = Field(..., description="Owning user ID")
    workout_date: date = Field(..., description="Calendar date the workout counts for")
    started_at: datetime = Field(..., description="Start timestamp")
    completed_at: Optional[datetime] = Field(None, description="Finish timestamp")
    finished: bool = Field(..., description="Whether the workout is finished")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 12,
                "user_id": 1,
                "workout_date": "2024-01-15",
                "started_at": "2024-01-15T17:30:00",
                "completed_at": "2024-01-15T18:15:00",
                "finished": True
            }
        }


class SetCreateRequest(CamelModel):
    """Schema for adding a set to an active workout."""

    exercise_id: int = Field(..., description="Exercise performed")
    pts: int = Field(..., ge=0, description="Points earned")


class SetUpdateRequest(BaseModel):
    """Schema for editing a set's points."""

    pts: int = Field(..., ge=0, description="Points earned")


class SetResponse(BaseModel):
    """Schema for set API responses."""

    id: int = Field(..., description="Set ID")
    workout_id: int = Field(..., description="Workout ID")
    exercise_id: int = Field(..., description="Exercise ID")
    pts: int = Field(..., description="Points earned")

    class Config:
        from_attributes = True


class SetWithDetails(SetResponse):
    """Set joined with its exercise and body area names."""

    exercise_name: str = Field(..., description="Exercise name")
    body_area_name: str = Field(..., description="Body area name")


class ActiveWorkoutResponse(BaseModel):
    """An unfinished workout together with its sets."""

    workout: WorkoutResponse
    sets: List[SetWithDetails] = Field(default_factory=list)


class WorkoutWithSets(WorkoutResponse):
    """Finished workout with its sets, used by the history view."""

    sets: List[SetWithDetails] = Field(default_factory=list)


class OkResponse(BaseModel):
    """Acknowledgement for deletes and aborts."""

    ok: bool = True
