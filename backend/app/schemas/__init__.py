"""Pydantic schemas package for API request/response models."""

from app.schemas.common import CamelModel
from app.schemas.user import ActivePlanUpdate, UserCreate, UserResponse
from app.schemas.plans import (
    BodyAreaResponse,
    ExerciseResponse,
    FocusAreaCreate,
    FocusAreaResponse,
    WorkoutPlanCreate,
    WorkoutPlanResponse,
)
from app.schemas.workout import (
    ActiveWorkoutResponse,
    OkResponse,
    SetCreateRequest,
    SetResponse,
    SetUpdateRequest,
    SetWithDetails,
    WorkoutResponse,
    WorkoutStartRequest,
    WorkoutUpdateRequest,
    WorkoutWithSets,
)
from app.schemas.suggestion import (
    BodyAreaRef,
    FocusAreaSuggestion,
    SuggestedExercise,
    SuggestedFocusArea,
    SuggestionsResponse,
)

__all__ = [
    "CamelModel",
    # User schemas
    "ActivePlanUpdate",
    "UserCreate",
    "UserResponse",
    # Plan schemas
    "BodyAreaResponse",
    "ExerciseResponse",
    "FocusAreaCreate",
    "FocusAreaResponse",
    "WorkoutPlanCreate",
    "WorkoutPlanResponse",
    # Workout schemas
    "ActiveWorkoutResponse",
    "OkResponse",
    "SetCreateRequest",
    "SetResponse",
    "SetUpdateRequest",
    "SetWithDetails",
    "WorkoutResponse",
    "WorkoutStartRequest",
    "WorkoutUpdateRequest",
    "WorkoutWithSets",
    # Suggestion schemas
    "BodyAreaRef",
    "FocusAreaSuggestion",
    "SuggestedExercise",
    "SuggestedFocusArea",
    "SuggestionsResponse",
]
