"""Sets API router: add, edit and remove sets."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet
from app.schemas.workout import OkResponse, SetCreateRequest, SetResponse, SetUpdateRequest

router = APIRouter()


@router.post(
    "/workouts/{workout_id}/sets",
    response_model=SetResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_set(
    workout_id: int,
    set_data: SetCreateRequest,
    db: Session = Depends(get_db),
) -> WorkoutSet:
    """
    Add a set to an unfinished workout.

    Raises:
        HTTPException: 404 if the workout is missing or already finished
        HTTPException: 404 if the exercise does not exist
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

    exercise = db.query(Exercise).filter(Exercise.id == set_data.exercise_id).first()
    if not exercise:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Exercise {set_data.exercise_id} not found",
        )

    workout_set = WorkoutSet(workout_id=workout.id, exercise_id=exercise.id, pts=set_data.pts)
    db.add(workout_set)
    db.commit()
    db.refresh(workout_set)

    return workout_set


@router.put("/sets/{set_id}", response_model=SetResponse)
async def update_set(
    set_id: int,
    set_data: SetUpdateRequest,
    db: Session = Depends(get_db),
) -> WorkoutSet:
    """Change the points on a set, before or after its workout finished."""
    workout_set = db.query(WorkoutSet).filter(WorkoutSet.id == set_id).first()
    if not workout_set:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Set not found",
        )

    workout_set.pts = set_data.pts
    db.commit()
    db.refresh(workout_set)

    return workout_set


@router.delete("/sets/{set_id}", response_model=OkResponse)
async def delete_set(
    set_id: int,
    db: Session = Depends(get_db),
) -> OkResponse:
    """Remove a set."""
    workout_set = db.query(WorkoutSet).filter(WorkoutSet.id == set_id).first()
    if not workout_set:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Set not found",
        )

    db.delete(workout_set)
    db.commit()

    return OkResponse()
