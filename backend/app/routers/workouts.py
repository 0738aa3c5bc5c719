"""Workouts API router: start, finish, abort, edit and browse history."""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.models.workout import Workout
from app.routers.users import get_user_or_404
from app.schemas.workout import (
    ActiveWorkoutResponse,
    OkResponse,
    WorkoutResponse,
    WorkoutStartRequest,
    WorkoutUpdateRequest,
    WorkoutWithSets,
)
from app.services.clock import local_today
from app.services.history_queries import active_workout_response, history_service, set_details

logger = logging.getLogger(__name__)

router = APIRouter()


def _active_conflict() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="An active workout already exists",
    )


@router.post(
    "/users/{user_id}/workouts/start",
    response_model=WorkoutResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_workout(
    user_id: int,
    request: Optional[WorkoutStartRequest] = None,
    db: Session = Depends(get_db),
) -> Workout:
    """
    Start a new, unfinished workout for the user.

    Only one unfinished workout may exist per user. The check below catches
    the common case; the partial unique index on ``workouts`` catches
    concurrent starts.

    Raises:
        HTTPException: 404 if the user does not exist
        HTTPException: 409 if an unfinished workout already exists
    """
    user = get_user_or_404(db, user_id)

    existing = history_service.active_workout(db, user.id)
    if existing:
        logger.warning(f"User {user.id} tried to start a workout while workout {existing.id} is active")
        raise _active_conflict()

    workout_date = request.workout_date if request and request.workout_date else local_today()
    workout = Workout(
        user_id=user.id,
        workout_date=workout_date,
        started_at=datetime.utcnow(),
        finished=False,
    )
    db.add(workout)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Concurrent workout start rejected for user {user.id}")
        raise _active_conflict()
    db.refresh(workout)

    logger.info(f"Started workout {workout.id} for user {user.id} on {workout.workout_date}")

    return workout


@router.post("/workouts/{workout_id}/finish", response_model=WorkoutResponse)
async def finish_workout(
    workout_id: int,
    db: Session = Depends(get_db),
) -> Workout:
    """
    Mark an unfinished workout as finished.

    Raises:
        HTTPException: 404 if no unfinished workout has this ID
    """
    workout = db.query(Workout).filter(
        Workout.id == workout_id,
        Workout.finished.is_(False),
    ).first()
    if not workout:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Active workout not found",
        )

    workout.finished = True
    workout.completed_at = datetime.utcnow()
    db.commit()
    db.refresh(workout)

    logger.info(f"Finished workout {workout.id}")

    return workout


@router.post("/workouts/{workout_id}/abort", response_model=OkResponse)
async def abort_workout(
    workout_id: int,
    db: Session = Depends(get_db),
) -> OkResponse:
    """
    Discard an unfinished workout together with its sets.

    Raises:
        HTTPException: 404 if no unfinished workout has this ID
    """
    workout = db.query(Workout).filter(
        Workout.id == workout_id,
        Workout.finished.is_(False),
    ).first()
    if not workout:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Active workout not found",
        )

    # Sets go with the workout (delete-orphan cascade), in the same commit
    db.delete(workout)
    db.commit()

    logger.info(f"Aborted workout {workout_id}")

    return OkResponse()


@router.get("/users/{user_id}/workouts/active", response_model=Optional[ActiveWorkoutResponse])
async def get_active_workout(
    user_id: int,
    db: Session = Depends(get_db),
) -> Optional[ActiveWorkoutResponse]:
    """Get the user's unfinished workout with its sets, or null."""
    return active_workout_response(history_service.active_workout(db, user_id))


@router.put("/workouts/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: int,
    update: WorkoutUpdateRequest,
    db: Session = Depends(get_db),
) -> Workout:
    """
    Change the date a finished workout counts for.

    Raises:
        HTTPException: 404 if no finished workout has this ID
    """
    workout = db.query(Workout).filter(
        Workout.id == workout_id,
        Workout.finished.is_(True),
    ).first()
    if not workout:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Finished workout not found",
        )

    workout.workout_date = update.workout_date
    db.commit()
    db.refresh(workout)

    return workout


@router.delete("/workouts/{workout_id}", response_model=OkResponse)
async def delete_workout(
    workout_id: int,
    db: Session = Depends(get_db),
) -> OkResponse:
    """
    Delete a finished workout and its sets.

    Raises:
        HTTPException: 404 if no finished workout has this ID
    """
    workout = db.query(Workout).filter(
        Workout.id == workout_id,
        Workout.finished.is_(True),
    ).first()
    if not workout:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Finished workout not found",
        )

    db.delete(workout)
    db.commit()

    logger.info(f"Deleted workout {workout_id}")

    return OkResponse()


@router.get("/users/{user_id}/history", response_model=List[WorkoutWithSets])
async def get_history(
    user_id: int,
    db: Session = Depends(get_db),
) -> List[WorkoutWithSets]:
    """Recent finished workouts, newest workout date first, with their sets."""
    limit = get_settings().HISTORY_LIMIT
    workouts = history_service.recent_finished(db, user_id, limit)

    return [
        WorkoutWithSets(
            **WorkoutResponse.model_validate(workout).model_dump(),
            sets=[set_details(s) for s in workout.sets],
        )
        for workout in workouts
    ]
