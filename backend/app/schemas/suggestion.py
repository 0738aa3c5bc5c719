"""Pydantic schemas for the suggestions endpoint.

These models serialize with camelCase keys, which is the wire format the
dashboard client consumes.
"""

from typing import List, Optional

from pydantic import Field

from app.models.workout_plan import PtsType
from app.schemas.common import CamelModel
from app.schemas.workout import ActiveWorkoutResponse


class BodyAreaRef(CamelModel):
    """Body area identity embedded in a suggestion."""

    id: int
    name: str


class SuggestedFocusArea(CamelModel):
    """The focus area a suggestion was computed for."""

    id: int
    body_area: BodyAreaRef
    pts_per_period: int
    pts_type: PtsType
    period_length_days: int
    color_index: Optional[int] = None


class SuggestedExercise(CamelModel):
    """Exercise within a suggested area, annotated with recency."""

    id: int
    body_area_id: int
    name: str
    days_since_last: Optional[int] = Field(None, description="Null when never performed")


class FocusAreaSuggestion(CamelModel):
    """Ranked, computed view of one focus area. Never persisted."""

    focus_area: SuggestedFocusArea
    pts_fulfilled: int = Field(..., description="Points logged in the rolling window")
    days_since_last: Optional[int] = Field(None, description="Null when the body area was never trained")
    overdue_fraction: float
    fulfillment_fraction: float
    priority: float
    exercises: List[SuggestedExercise] = Field(default_factory=list)


class SuggestionsResponse(CamelModel):
    """Response for GET /api/users/{user_id}/suggestions."""

    suggestions: List[FocusAreaSuggestion] = Field(default_factory=list)
    active_workout: Optional[ActiveWorkoutResponse] = None
