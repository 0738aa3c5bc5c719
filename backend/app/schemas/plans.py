"""Pydantic schemas for body areas, exercises, workout plans and focus areas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.workout_plan import PtsType
from app.schemas.common import CamelModel


# ============== Reference Data Schemas ==============

class BodyAreaResponse(BaseModel):
    """Schema for a body area."""

    id: int = Field(..., description="Body area ID")
    name: str = Field(..., description="Body area name")

    class Config:
        from_attributes = True


class ExerciseResponse(BaseModel):
    """Schema for an exercise with its body area name."""

    id: int = Field(..., description="Exercise ID")
    body_area_id: int = Field(..., description="Body area ID")
    name: str = Field(..., description="Exercise name")
    body_area_name: str = Field(..., description="Body area name")


# ============== Focus Area Schemas ==============

class FocusAreaCreate(CamelModel):
    """Schema for one focus area inside a plan create/replace request."""

    body_area_id: int = Field(..., description="Body area this target applies to")
    pts_per_period: int = Field(..., gt=0, description="Target points per rolling period")
    pts_type: PtsType = Field(PtsType.EFFORT, description="Unit the points are logged in")
    period_length_days: int = Field(..., gt=0, description="Rolling period length in days")
    color_index: Optional[int] = Field(None, ge=0, description="Palette slot; assigned when omitted")


class FocusAreaResponse(BaseModel):
    """Schema for focus area API responses."""

    id: int = Field(..., description="Focus area ID")
    plan_id: int = Field(..., description="Workout plan ID")
    body_area_id: int = Field(..., description="Body area ID")
    body_area_name: str = Field(..., description="Body area name")
    pts_per_period: int = Field(..., description="Target points per period")
    pts_type: PtsType = Field(..., description="Point unit")
    period_length_days: int = Field(..., description="Rolling period length in days")
    color_index: Optional[int] = Field(None, description="Palette slot")


# ============== Workout Plan Schemas ==============

class WorkoutPlanCreate(CamelModel):
    """Schema for creating or fully replacing a workout plan."""

    name: str = Field(..., max_length=255, description="Plan name")
    focus_areas: List[FocusAreaCreate] = Field(default_factory=list, description="Focus area targets")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "General Fitness",
                "focusAreas": [
                    {"bodyAreaId": 1, "ptsPerPeriod": 3, "ptsType": "effort", "periodLengthDays": 7},
                    {"bodyAreaId": 3, "ptsPerPeriod": 75, "ptsType": "active_minutes", "periodLengthDays": 4}
                ]
            }
        }


class WorkoutPlanResponse(BaseModel):
    """Schema for workout plan API responses."""

    id: int = Field(..., description="Plan ID")
    user_id: int = Field(..., description="Owning user ID")
    name: str = Field(..., description="Plan name")
    created_at: datetime = Field(..., description="Created timestamp")
    focus_areas: List[FocusAreaResponse] = Field(default_factory=list, description="Focus areas")
