"""Read-only queries over a user's training history.

Only finished workouts count towards history. Each query returns a plain
mapping so the results can be handed to the suggestion engine unchanged.
"""

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet
from app.schemas.workout import ActiveWorkoutResponse, SetWithDetails, WorkoutResponse


class HistoryService:
    """Aggregate queries over finished workouts and their sets."""

    def points_in_window(
        self,
        db: Session,
        user_id: int,
        body_area_id: int,
        period_length_days: int,
        today: date,
    ) -> int:
        """
        Sum of set points for a body area over the trailing window.

        The window starts ``period_length_days`` before ``today`` (inclusive)
        and has no upper bound.
        """
        window_start = today - timedelta(days=period_length_days)

        total = db.query(
            func.coalesce(func.sum(WorkoutSet.pts), 0)
        ).join(
            Workout, Workout.id == WorkoutSet.workout_id
        ).join(
            Exercise, Exercise.id == WorkoutSet.exercise_id
        ).filter(
            Workout.user_id == user_id,
            Workout.finished.is_(True),
            Workout.workout_date >= window_start,
            Exercise.body_area_id == body_area_id,
        ).scalar()

        return int(total or 0)

    def last_done_by_body_area(
        self,
        db: Session,
        user_id: int,
        body_area_ids: Iterable[int],
    ) -> Dict[int, date]:
        """Most recent finished workout date per body area (all time)."""
        body_area_ids = list(body_area_ids)
        if not body_area_ids:
            return {}

        rows = db.query(
            Exercise.body_area_id,
            func.max(Workout.workout_date),
        ).join(
            WorkoutSet, WorkoutSet.exercise_id == Exercise.id
        ).join(
            Workout, Workout.id == WorkoutSet.workout_id
        ).filter(
            Workout.user_id == user_id,
            Workout.finished.is_(True),
            Exercise.body_area_id.in_(body_area_ids),
        ).group_by(Exercise.body_area_id).all()

        return {body_area_id: last for body_area_id, last in rows if last is not None}

    def last_done_by_exercise(
        self,
        db: Session,
        user_id: int,
        exercise_ids: Iterable[int],
    ) -> Dict[int, date]:
        """Most recent finished workout date per exercise (all time)."""
        exercise_ids = list(exercise_ids)
        if not exercise_ids:
            return {}

        rows = db.query(
            WorkoutSet.exercise_id,
            func.max(Workout.workout_date),
        ).join(
            Workout, Workout.id == WorkoutSet.workout_id
        ).filter(
            Workout.user_id == user_id,
            Workout.finished.is_(True),
            WorkoutSet.exercise_id.in_(exercise_ids),
        ).group_by(WorkoutSet.exercise_id).all()

        return {exercise_id: last for exercise_id, last in rows if last is not None}

    def exercises_by_body_area(
        self,
        db: Session,
        body_area_ids: Iterable[int],
    ) -> Dict[int, List[Exercise]]:
        """Exercises grouped by body area, each group ordered by name."""
        body_area_ids = list(body_area_ids)
        if not body_area_ids:
            return {}

        exercises = db.query(Exercise).filter(
            Exercise.body_area_id.in_(body_area_ids)
        ).order_by(Exercise.body_area_id, Exercise.name).all()

        grouped: Dict[int, List[Exercise]] = defaultdict(list)
        for exercise in exercises:
            grouped[exercise.body_area_id].append(exercise)
        return dict(grouped)

    def active_workout(self, db: Session, user_id: int) -> Optional[Workout]:
        """The user's unfinished workout, if any (latest started wins)."""
        return db.query(Workout).options(
            joinedload(Workout.sets).joinedload(WorkoutSet.exercise).joinedload(Exercise.body_area)
        ).filter(
            Workout.user_id == user_id,
            Workout.finished.is_(False),
        ).order_by(Workout.started_at.desc()).first()

    def recent_finished(self, db: Session, user_id: int, limit: int) -> List[Workout]:
        """Latest finished workouts by workout date, newest first."""
        return db.query(Workout).options(
            joinedload(Workout.sets).joinedload(WorkoutSet.exercise).joinedload(Exercise.body_area)
        ).filter(
            Workout.user_id == user_id,
            Workout.finished.is_(True),
        ).order_by(Workout.workout_date.desc(), Workout.id.desc()).limit(limit).all()


def set_details(workout_set: WorkoutSet) -> SetWithDetails:
    """Flatten a set with its exercise and body area names."""
    exercise = workout_set.exercise
    return SetWithDetails(
        id=workout_set.id,
        workout_id=workout_set.workout_id,
        exercise_id=workout_set.exercise_id,
        pts=workout_set.pts,
        exercise_name=exercise.name,
        body_area_name=exercise.body_area.name,
    )


def active_workout_response(workout: Optional[Workout]) -> Optional[ActiveWorkoutResponse]:
    """Build the ``{workout, sets}`` payload, or None when there is no workout."""
    if workout is None:
        return None
    return ActiveWorkoutResponse(
        workout=WorkoutResponse.model_validate(workout),
        sets=[set_details(s) for s in workout.sets],
    )


# Singleton instance for import
history_service = HistoryService()
