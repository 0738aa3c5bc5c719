"""Workout plans API router, plus the body area and exercise catalog."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from app.database import get_db
from app.models.body_area import BodyArea
from app.models.exercise import Exercise
from app.models.user import User
from app.models.workout_plan import FocusArea, WorkoutPlan
from app.routers.users import get_user_or_404
from app.schemas.plans import (
    BodyAreaResponse,
    ExerciseResponse,
    WorkoutPlanCreate,
    WorkoutPlanResponse,
)
from app.schemas.workout import OkResponse
from app.services.plan_service import UnknownBodyAreaError, plan_response, plan_service

logger = logging.getLogger(__name__)

router = APIRouter()


# ============== Catalog Endpoints ==============

@router.get("/body-areas", response_model=List[BodyAreaResponse])
async def list_body_areas(db: Session = Depends(get_db)) -> List[BodyArea]:
    """List all body areas ordered by name."""
    return db.query(BodyArea).order_by(BodyArea.name).all()


@router.get("/exercises", response_model=List[ExerciseResponse])
async def list_exercises(db: Session = Depends(get_db)) -> List[ExerciseResponse]:
    """List all exercises ordered by body area name, then exercise name."""
    rows = db.query(Exercise, BodyArea.name).join(
        BodyArea, BodyArea.id == Exercise.body_area_id
    ).order_by(BodyArea.name, Exercise.name).all()

    return [
        ExerciseResponse(
            id=exercise.id,
            body_area_id=exercise.body_area_id,
            name=exercise.name,
            body_area_name=body_area_name,
        )
        for exercise, body_area_name in rows
    ]


# ============== Plan CRUD Endpoints ==============

def _validate_plan_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Plan name is required",
        )
    return name


@router.get("/users/{user_id}/plans", response_model=List[WorkoutPlanResponse])
async def list_plans(
    user_id: int,
    db: Session = Depends(get_db),
) -> List[WorkoutPlanResponse]:
    """
    List a user's plans with their focus areas.

    Plan responses use snake_case keys (``focus_areas``, ``body_area_name``)
    like the other stored rows; only the suggestions payload is camelCase.
    Request bodies accept either case.
    """
    plans = db.query(WorkoutPlan).options(
        joinedload(WorkoutPlan.focus_areas).joinedload(FocusArea.body_area)
    ).filter(
        WorkoutPlan.user_id == user_id
    ).order_by(WorkoutPlan.id).all()

    return [plan_response(plan) for plan in plans]


@router.post(
    "/users/{user_id}/plans",
    response_model=WorkoutPlanResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_plan(
    user_id: int,
    plan_data: WorkoutPlanCreate,
    db: Session = Depends(get_db),
) -> WorkoutPlanResponse:
    """
    Create a plan with its focus areas in one transaction.

    Focus areas without a color index get the next free palette slot.
    The response uses snake_case keys, see ``list_plans``.
    """
    name = _validate_plan_name(plan_data.name)
    if not plan_data.focus_areas:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one focus area is required",
        )
    user: User = get_user_or_404(db, user_id)

    try:
        focus_areas = plan_service.build_focus_areas(db, plan_data.focus_areas)
    except UnknownBodyAreaError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    plan = WorkoutPlan(user_id=user.id, name=name, focus_areas=focus_areas)
    db.add(plan)
    db.commit()
    db.refresh(plan)

    logger.info(f"Created workout plan {plan.id} for user {user.id} with {len(focus_areas)} focus areas")

    return plan_response(plan)


@router.put("/plans/{plan_id}", response_model=WorkoutPlanResponse)
async def replace_plan(
    plan_id: int,
    plan_data: WorkoutPlanCreate,
    db: Session = Depends(get_db),
) -> WorkoutPlanResponse:
    """Replace a plan's name and all of its focus areas."""
    name = _validate_plan_name(plan_data.name)

    plan = db.query(WorkoutPlan).filter(WorkoutPlan.id == plan_id).first()
    if not plan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Plan not found",
        )

    try:
        plan_service.replace_focus_areas(db, plan, plan_data.focus_areas)
    except UnknownBodyAreaError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    plan.name = name
    db.commit()
    db.refresh(plan)

    logger.info(f"Replaced workout plan {plan.id}")

    return plan_response(plan)


@router.delete("/plans/{plan_id}", response_model=OkResponse)
async def delete_plan(
    plan_id: int,
    db: Session = Depends(get_db),
) -> OkResponse:
    """Delete a plan and its focus areas, clearing it as anyone's active plan."""
    plan = db.query(WorkoutPlan).filter(WorkoutPlan.id == plan_id).first()
    if not plan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Plan not found",
        )

    db.query(User).filter(User.active_plan_id == plan_id).update(
        {"active_plan_id": None}, synchronize_session="fetch"
    )
    db.delete(plan)
    db.commit()

    logger.info(f"Deleted workout plan {plan_id}")

    return OkResponse()
