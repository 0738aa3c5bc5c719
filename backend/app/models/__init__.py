"""Database models for the workout tracker."""

from app.models.base import Base
from app.models.user import User
from app.models.body_area import BodyArea
from app.models.exercise import Exercise
from app.models.workout_plan import WorkoutPlan, FocusArea, PtsType
from app.models.workout import Workout, WorkoutSet

__all__ = [
    "Base",
    "User",
    "BodyArea",
    "Exercise",
    "WorkoutPlan",
    "FocusArea",
    "PtsType",
    "Workout",
    "WorkoutSet",
]
