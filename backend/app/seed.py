"""Reset the database and load demo data.

Usage:
    python -m app.seed
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Tuple

from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import SessionLocal, create_tables, drop_tables
from app.models import BodyArea, Exercise, FocusArea, PtsType, User, Workout, WorkoutPlan, WorkoutSet
from app.services.clock import local_today
from app.services.plan_service import plan_service

logger = logging.getLogger(__name__)

EXERCISES_BY_AREA: Dict[str, List[str]] = {
    "Lower Body": ["Split Squat", "Single Leg Romanian Deadlift", "Step Ups", "Jumps"],
    "Trunk Strength": ["Med Ball Throw", "Scoop Toss", "Cable Chops/Lifts", "Shotput Throw"],
    "Cardio": ["Jog", "Nordic 4x4s", "Stairmaster", "Rucking Incline"],
    "Mobility": ["Thoracic Rotation", "CARs", "Ankle Dorsiflexion"],
    "Back": ["Chest Supported Row", "Lat Pulldown", "Face Pulls"],
    "Shoulder": ["Landmine Press"],
    "Trunk Control": ["Pallof Press", "Dead Bugs"],
    "Chest": ["Bench Press", "Incline Dumbbell Press", "Cable Fly", "Push-ups"],
    "Arms": ["Barbell Curl", "Tricep Pushdown", "Hammer Curl", "Overhead Tricep Extension"],
    "Core Endurance": ["Plank Hold", "Farmer's Carry", "Suitcase Carry"],
}

# (body area, pts per period, pts type, period length in days)
PlanTargets = List[Tuple[str, int, PtsType, int]]

GENERAL_FITNESS: PlanTargets = [
    ("Lower Body", 3, PtsType.EFFORT, 7),
    ("Trunk Strength", 3, PtsType.EFFORT, 7),
    ("Cardio", 75, PtsType.ACTIVE_MINUTES, 4),
    ("Mobility", 2, PtsType.EFFORT, 4),
    ("Back", 3, PtsType.EFFORT, 7),
    ("Shoulder", 2, PtsType.EFFORT, 7),
    ("Trunk Control", 2, PtsType.EFFORT, 7),
    ("Chest", 3, PtsType.EFFORT, 7),
    ("Arms", 2, PtsType.EFFORT, 7),
    ("Core Endurance", 2, PtsType.EFFORT, 7),
]

UPPER_FOCUS: PlanTargets = [
    ("Back", 4, PtsType.EFFORT, 5),
    ("Shoulder", 3, PtsType.EFFORT, 5),
    ("Chest", 4, PtsType.EFFORT, 5),
    ("Arms", 3, PtsType.EFFORT, 5),
    ("Cardio", 60, PtsType.ACTIVE_MINUTES, 7),
    ("Mobility", 2, PtsType.EFFORT, 7),
]

# (days ago, duration in minutes, [(exercise, pts)])
HISTORY: List[Tuple[int, int, List[Tuple[str, int]]]] = [
    (2, 45, [("Chest Supported Row", 2), ("Lat Pulldown", 2), ("Landmine Press", 1)]),
    (5, 60, [("Jog", 30), ("Stairmaster", 20), ("Thoracic Rotation", 1)]),
    (8, 50, [("Bench Press", 2), ("Barbell Curl", 2), ("Split Squat", 2), ("Tricep Pushdown", 1)]),
]


def _build_plan(user: User, name: str, targets: PlanTargets, areas: Dict[str, BodyArea]) -> WorkoutPlan:
    plan = WorkoutPlan(user=user, name=name)
    for position, (area_name, pts, pts_type, days) in enumerate(targets):
        plan.focus_areas.append(FocusArea(
            body_area=areas[area_name],
            pts_per_period=pts,
            pts_type=pts_type,
            period_length_days=days,
            color_index=position % plan_service.PALETTE_SIZE,
        ))
    return plan


def seed(db: Session) -> User:
    """Load body areas, exercises, a demo user with two plans, and some history."""
    areas: Dict[str, BodyArea] = {}
    exercises: Dict[str, Exercise] = {}
    for area_name, exercise_names in EXERCISES_BY_AREA.items():
        area = BodyArea(name=area_name)
        areas[area_name] = area
        db.add(area)
        for exercise_name in exercise_names:
            exercise = Exercise(body_area=area, name=exercise_name)
            exercises[exercise_name] = exercise
            db.add(exercise)

    user = User(name="PJ")
    db.add(user)

    general = _build_plan(user, "General Fitness", GENERAL_FITNESS, areas)
    upper = _build_plan(user, "Upper Focus", UPPER_FOCUS, areas)
    db.add_all([general, upper])
    db.flush()
    user.active_plan_id = general.id

    today = local_today()
    now = datetime.utcnow()
    for days_ago, minutes, sets in HISTORY:
        started_at = now - timedelta(days=days_ago)
        workout = Workout(
            user=user,
            workout_date=today - timedelta(days=days_ago),
            started_at=started_at,
            completed_at=started_at + timedelta(minutes=minutes),
            finished=True,
        )
        for exercise_name, pts in sets:
            workout.sets.append(WorkoutSet(exercise=exercises[exercise_name], pts=pts))
        db.add(workout)

    db.commit()
    logger.info(
        f"Seeded {len(areas)} body areas, {len(exercises)} exercises, "
        f"user {user.id} with {len(HISTORY)} workouts"
    )
    return user


def main() -> None:
    logging.basicConfig(level=get_settings().LOG_LEVEL.upper())
    logger.info("Resetting database")
    drop_tables()
    create_tables()

    db = SessionLocal()
    try:
        seed(db)
    except Exception:
        db.rollback()
        logger.exception("Seed failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
