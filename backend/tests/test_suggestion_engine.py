from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Optional

from app.models.workout_plan import PtsType
from app.services.suggestion_engine import (
    ExerciseSnapshot,
    FocusAreaSnapshot,
    SuggestionEngine,
    compute_suggestions,
)

TODAY = date(2024, 3, 15)


def focus_area(
    fa_id: int = 1,
    body_area_id: Optional[int] = None,
    pts: int = 3,
    days: int = 7,
) -> FocusAreaSnapshot:
    body_area_id = body_area_id if body_area_id is not None else fa_id
    return FocusAreaSnapshot(
        id=fa_id,
        body_area_id=body_area_id,
        body_area_name=f"Area {body_area_id}",
        pts_per_period=pts,
        period_length_days=days,
        pts_type=PtsType.EFFORT,
        color_index=fa_id % 12,
    )


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


def suggest_one(fa: FocusAreaSnapshot, pts_fulfilled: int = 0, last_done: Optional[date] = None):
    result = compute_suggestions(
        [fa],
        {fa.id: pts_fulfilled},
        {fa.body_area_id: last_done} if last_done else {},
        {},
        {},
        TODAY,
    )
    assert len(result) == 1
    return result[0]


def test_never_done_area_gets_sentinel_regardless_of_points() -> None:
    for pts in (0, 2, 3, 10):
        s = suggest_one(focus_area(), pts_fulfilled=pts)
        assert s.days_since_last is None
        assert s.overdue_fraction == 2.0


def test_scenario_never_done_and_nothing_logged() -> None:
    s = suggest_one(focus_area(pts=3, days=7), pts_fulfilled=0)
    assert s.fulfillment_fraction == 0
    assert s.overdue_fraction == 2.0
    assert s.priority == 8.0


def test_scenario_target_met_at_period_boundary() -> None:
    s = suggest_one(focus_area(pts=3, days=7), pts_fulfilled=3, last_done=days_ago(7))
    assert s.days_since_last == 7
    assert s.fulfillment_fraction == 1
    assert s.overdue_fraction == 0
    assert s.priority == 0


def test_scenario_target_met_but_overdue() -> None:
    s = suggest_one(focus_area(pts=3, days=7), pts_fulfilled=3, last_done=days_ago(10))
    assert s.days_since_last == 10
    assert s.overdue_fraction == 0.43
    assert s.priority == 1.29


def test_scenario_never_done_ranks_before_fresh_area() -> None:
    fresh = focus_area(fa_id=1, pts=3)
    never = focus_area(fa_id=2, pts=3)
    result = compute_suggestions(
        [fresh, never],
        {fresh.id: 3, never.id: 0},
        {fresh.body_area_id: TODAY},
        {},
        {},
        TODAY,
    )
    assert [s.focus_area.id for s in result] == [never.id, fresh.id]
    assert [s.priority for s in result] == [8.0, 0]


def test_output_sorted_by_priority_descending() -> None:
    areas = [focus_area(fa_id=i, pts=4, days=5) for i in range(1, 7)]
    fulfillment = {1: 0, 2: 4, 3: 1, 4: 2, 5: 8, 6: 3}
    last_done = {1: days_ago(1), 2: days_ago(12), 4: days_ago(6), 5: days_ago(0), 6: days_ago(30)}

    result = compute_suggestions(areas, fulfillment, last_done, {}, {}, TODAY)

    priorities = [s.priority for s in result]
    assert priorities == sorted(priorities, reverse=True)
    assert result[0].focus_area.id == 6


def test_more_points_never_lower_fulfillment_and_lower_priority_until_met() -> None:
    fa = focus_area(pts=3, days=7)
    previous = None
    for pts in range(0, 6):
        s = suggest_one(fa, pts_fulfilled=pts, last_done=days_ago(3))
        if previous is not None:
            assert s.fulfillment_fraction >= previous.fulfillment_fraction
            if pts <= fa.pts_per_period:
                assert s.priority < previous.priority
            else:
                assert s.priority == previous.priority == 0
        previous = s


def test_overdue_fraction_grows_linearly_past_period() -> None:
    period = 8
    fa = focus_area(pts=3, days=period)
    expected = [0.13, 0.25, 0.38, 0.5, 0.63, 0.75, 0.88, 1.0, 1.13]
    for k, overdue in enumerate(expected, start=1):
        s = suggest_one(fa, pts_fulfilled=3, last_done=days_ago(period + k))
        assert s.overdue_fraction == overdue


def test_exact_halves_round_up() -> None:
    s = suggest_one(focus_area(pts=8, days=8), pts_fulfilled=1, last_done=days_ago(9))
    # 1/8 = 0.125 for both fractions, priority 0.875 * 2 + 0.125 * 3 = 2.125
    assert s.fulfillment_fraction == 0.13
    assert s.overdue_fraction == 0.13
    assert s.priority == 2.13


def test_round_half_up() -> None:
    engine = SuggestionEngine()
    assert engine.round_half_up(0.125) == 0.13
    assert engine.round_half_up(0.375) == 0.38
    assert engine.round_half_up(3.2857) == 3.29
    assert engine.round_half_up(2.0) == 2.0


def test_fulfillment_fraction_is_not_clamped() -> None:
    s = suggest_one(focus_area(pts=3, days=7), pts_fulfilled=6, last_done=days_ago(1))
    assert s.fulfillment_fraction == 2.0
    assert s.priority == 0


def test_exercises_never_done_first_then_most_neglected() -> None:
    fa = focus_area(fa_id=1, body_area_id=10)
    exercises = [
        ExerciseSnapshot(id=1, body_area_id=10, name="A"),
        ExerciseSnapshot(id=2, body_area_id=10, name="B"),
        ExerciseSnapshot(id=3, body_area_id=10, name="C"),
        ExerciseSnapshot(id=4, body_area_id=10, name="D"),
        ExerciseSnapshot(id=5, body_area_id=10, name="E"),
    ]
    exercise_last_done = {2: days_ago(3), 3: days_ago(10), 5: days_ago(0)}

    result = compute_suggestions(
        [fa], {}, {10: days_ago(0)}, {10: exercises}, exercise_last_done, TODAY
    )

    ordered = result[0].exercises
    assert [ex.id for ex in ordered] == [1, 4, 3, 2, 5]
    assert [ex.days_since_last for ex in ordered] == [None, None, 10, 3, 0]


def test_empty_plan_yields_no_suggestions() -> None:
    assert compute_suggestions([], {}, {}, {}, {}, TODAY) == []


def test_area_without_exercises_gets_empty_list() -> None:
    s = suggest_one(focus_area())
    assert s.exercises == []


def test_missing_fulfillment_counts_as_zero() -> None:
    fa = focus_area(pts=3)
    result = compute_suggestions([fa], {}, {}, {}, {}, TODAY)
    assert result[0].pts_fulfilled == 0
    assert result[0].fulfillment_fraction == 0


def test_time_of_day_does_not_shift_day_count() -> None:
    fa = focus_area(pts=3, days=7)
    late_last_night = datetime(2024, 3, 14, 23, 59)
    just_after_midnight = datetime(2024, 3, 15, 0, 1)
    result = compute_suggestions(
        [fa], {fa.id: 0}, {fa.body_area_id: late_last_night}, {}, {}, just_after_midnight
    )
    assert result[0].days_since_last == 1


def test_zero_target_never_produces_nan_or_infinity() -> None:
    fa = focus_area(pts=0, days=0)

    untouched = suggest_one(fa, pts_fulfilled=0, last_done=days_ago(3))
    assert untouched.fulfillment_fraction == 0.0
    assert math.isfinite(untouched.priority)
    assert math.isfinite(untouched.overdue_fraction)

    logged = suggest_one(fa, pts_fulfilled=1, last_done=days_ago(0))
    assert logged.fulfillment_fraction == 1.0
    assert logged.priority == 0


def test_ties_keep_input_order() -> None:
    areas = [focus_area(fa_id=i) for i in (3, 1, 2)]
    result = compute_suggestions(areas, {}, {}, {}, {}, TODAY)
    assert [s.focus_area.id for s in result] == [3, 1, 2]


def test_weights_are_applied() -> None:
    engine = SuggestionEngine()
    assert engine.priority(0.5, 0.0) == 1.0
    assert engine.priority(1.0, 1.0) == 3.0
    assert engine.priority(1.5, 0.0) == 0.0


def test_serializes_with_camel_case_keys() -> None:
    fa = focus_area(fa_id=4, body_area_id=9, pts=3, days=7)
    exercises = {9: [ExerciseSnapshot(id=11, body_area_id=9, name="Lat Pulldown")]}
    s = compute_suggestions([fa], {4: 1}, {9: days_ago(2)}, exercises, {11: days_ago(2)}, TODAY)[0]

    payload = s.model_dump(by_alias=True, mode="json")
    assert set(payload) == {
        "focusArea",
        "ptsFulfilled",
        "daysSinceLast",
        "overdueFraction",
        "fulfillmentFraction",
        "priority",
        "exercises",
    }
    assert payload["focusArea"] == {
        "id": 4,
        "bodyArea": {"id": 9, "name": "Area 9"},
        "ptsPerPeriod": 3,
        "ptsType": "effort",
        "periodLengthDays": 7,
        "colorIndex": 4,
    }
    assert payload["exercises"] == [
        {"id": 11, "bodyAreaId": 9, "name": "Lat Pulldown", "daysSinceLast": 2}
    ]
