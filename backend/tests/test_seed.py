from __future__ import annotations

from app.models import BodyArea, Exercise, Workout
from app.seed import EXERCISES_BY_AREA, GENERAL_FITNESS, HISTORY, seed
from app.services.suggestion_service import suggestion_service


def test_seed_loads_demo_data(db_session) -> None:
    user = seed(db_session)

    assert db_session.query(BodyArea).count() == len(EXERCISES_BY_AREA)
    assert db_session.query(Exercise).count() == sum(len(names) for names in EXERCISES_BY_AREA.values())
    assert db_session.query(Workout).filter(Workout.finished.is_(True)).count() == len(HISTORY)

    assert user.name == "PJ"
    assert [plan.name for plan in user.plans] == ["General Fitness", "Upper Focus"]
    assert user.active_plan_id == user.plans[0].id


def test_seeded_user_gets_ranked_suggestions(db_session) -> None:
    user = seed(db_session)

    suggestions = suggestion_service.get_suggestions(db_session, user.id, user.active_plan_id)

    assert len(suggestions) == len(GENERAL_FITNESS)
    priorities = [s.priority for s in suggestions]
    assert priorities == sorted(priorities, reverse=True)
    # Rows and pulldowns two days ago cover the Back target
    back = next(s for s in suggestions if s.focus_area.body_area.name == "Back")
    assert back.pts_fulfilled == 4
    assert back.days_since_last == 2
    assert back.priority == 0
    # Areas never trained lead the list
    never_done = {s.focus_area.body_area.name for s in suggestions if s.days_since_last is None}
    assert never_done == {"Trunk Strength", "Trunk Control", "Core Endurance"}
    assert suggestions[0].focus_area.body_area.name in never_done
