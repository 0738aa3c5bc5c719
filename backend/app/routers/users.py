"""Users API router: list, create, and select the active plan."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.models.workout_plan import WorkoutPlan
from app.schemas.user import ActivePlanUpdate, UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def get_user_or_404(db: Session, user_id: int) -> User:
    """Load a user or raise 404."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


@router.get("/users", response_model=List[UserResponse])
async def list_users(db: Session = Depends(get_db)) -> List[User]:
    """List all users ordered by ID."""
    return db.query(User).order_by(User.id).all()


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
) -> User:
    """Create a user. The name must not be blank."""
    name = user_data.name.strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name is required",
        )

    user = User(name=name)
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Created user {user.id}")

    return user


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: Session = Depends(get_db)) -> User:
    """Get a single user."""
    return get_user_or_404(db, user_id)


@router.put("/users/{user_id}/active-plan", response_model=UserResponse)
async def set_active_plan(
    user_id: int,
    update: ActivePlanUpdate,
    db: Session = Depends(get_db),
) -> User:
    """
    Set or clear the user's active plan.

    The plan must belong to the user. Passing null clears the selection,
    after which suggestions come back empty.
    """
    if update.plan_id is not None:
        plan = db.query(WorkoutPlan).filter(
            WorkoutPlan.id == update.plan_id,
            WorkoutPlan.user_id == user_id,
        ).first()
        if not plan:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Plan not found",
            )

    user = get_user_or_404(db, user_id)
    user.active_plan_id = update.plan_id
    db.commit()
    db.refresh(user)

    logger.info(f"User {user_id} active plan set to {update.plan_id}")

    return user
