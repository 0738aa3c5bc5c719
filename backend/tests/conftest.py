from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, Iterator, List, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import get_db
from app.main import app
from app.models import Base, BodyArea, Exercise, User, Workout, WorkoutSet
from app.services.clock import local_today


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory) -> Iterator[TestClient]:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the lifespan hook never touches the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def catalog(db_session: Session) -> Dict[str, object]:
    """Three body areas with a few exercises each."""
    exercises_by_area = {
        "Back": ["Chest Supported Row", "Face Pulls", "Lat Pulldown"],
        "Cardio": ["Jog", "Stairmaster"],
        "Chest": ["Bench Press", "Push-ups"],
    }
    areas: Dict[str, BodyArea] = {}
    exercises: Dict[str, Exercise] = {}
    for area_name, names in exercises_by_area.items():
        area = BodyArea(name=area_name)
        db_session.add(area)
        areas[area_name] = area
        for name in names:
            exercise = Exercise(body_area=area, name=name)
            db_session.add(exercise)
            exercises[name] = exercise
    db_session.commit()
    return {"areas": areas, "exercises": exercises}


@pytest.fixture()
def user(db_session: Session) -> User:
    user = User(name="Tester")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def log_workout(db_session: Session):
    """Factory inserting a workout dated ``days_ago`` days before today."""

    def _log(
        user: User,
        days_ago: int,
        sets: List[Tuple[Exercise, int]],
        finished: bool = True,
    ) -> Workout:
        started_at = datetime.utcnow() - timedelta(days=days_ago)
        workout = Workout(
            user_id=user.id,
            workout_date=local_today() - timedelta(days=days_ago),
            started_at=started_at,
            completed_at=started_at + timedelta(minutes=45) if finished else None,
            finished=finished,
        )
        for exercise, pts in sets:
            workout.sets.append(WorkoutSet(exercise_id=exercise.id, pts=pts))
        db_session.add(workout)
        db_session.commit()
        return workout

    return _log
