"""Focus area suggestion engine.

Ranks a plan's focus areas by how urgently they need training. Two signals
feed the ranking:
- Points deficiency: how far the points logged inside the rolling period
  fall short of the target.
- Overdueness: how far past the rolling period the last session for the
  body area lies. Areas never trained get a fixed maximal value.

Priority = unfulfilled * 2 + overdue * 3

The engine is a pure function of its inputs. All data is loaded by the
caller (see ``SuggestionService``) and nothing is written back.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Mapping, Optional, Sequence, Union

from app.models.workout_plan import PtsType
from app.schemas.suggestion import (
    BodyAreaRef,
    FocusAreaSuggestion,
    SuggestedExercise,
    SuggestedFocusArea,
)
from app.services.clock import days_between

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


@dataclass(frozen=True)
class FocusAreaSnapshot:
    """Read-only copy of a focus area row joined with its body area name."""
    id: int
    body_area_id: int
    body_area_name: str
    pts_per_period: int
    period_length_days: int
    pts_type: PtsType = PtsType.EFFORT
    color_index: Optional[int] = None


@dataclass(frozen=True)
class ExerciseSnapshot:
    """Read-only copy of an exercise row."""
    id: int
    body_area_id: int
    name: str


class SuggestionEngine:
    """Score and rank focus areas, and order exercises within each area."""

    UNFULFILLED_WEIGHT = 2
    OVERDUE_WEIGHT = 3
    NEVER_DONE_OVERDUE = 2.0  # Pushes never-trained areas to the top
    DECIMALS = 2

    def compute_suggestions(
        self,
        focus_areas: Sequence[FocusAreaSnapshot],
        fulfillment_by_focus_area: Mapping[int, int],
        last_done_by_body_area: Mapping[int, Optional[DateLike]],
        exercises_by_body_area: Mapping[int, Sequence[ExerciseSnapshot]],
        exercise_last_done: Mapping[int, Optional[DateLike]],
        today: DateLike,
    ) -> List[FocusAreaSuggestion]:
        """
        Compute ranked suggestions for one plan's focus areas.

        Args:
            focus_areas: All focus areas of a single plan
            fulfillment_by_focus_area: Points logged in each focus area's window,
                keyed by focus area ID. Missing keys count as 0.
            last_done_by_body_area: Most recent finished workout date per body area.
                Missing keys or None mean never trained.
            exercises_by_body_area: Exercises per body area, in display order
            exercise_last_done: Most recent finished workout date per exercise
            today: Reference date. Datetimes are reduced to their date.

        Returns:
            Suggestions sorted by priority, highest first. Equal priorities
            keep the order of ``focus_areas``.
        """
        suggestions = [
            self._suggest(
                fa,
                pts_fulfilled=fulfillment_by_focus_area.get(fa.id, 0),
                last_done=last_done_by_body_area.get(fa.body_area_id),
                exercises=exercises_by_body_area.get(fa.body_area_id, []),
                exercise_last_done=exercise_last_done,
                today=today,
            )
            for fa in focus_areas
        ]

        # sorted() is stable, so ties keep input order
        suggestions = sorted(suggestions, key=lambda s: s.priority, reverse=True)

        ranking = [(s.focus_area.body_area.name, s.priority) for s in suggestions]
        logger.debug(f"Ranked {len(suggestions)} focus areas: {ranking}")
        return suggestions

    def fulfillment_fraction(self, pts_fulfilled: int, pts_per_period: int) -> float:
        """
        Share of the period target that has been logged. Not clamped to 1.

        A non-positive target counts as met by any logged points and unmet
        otherwise, so the score never becomes NaN or infinite.
        """
        if pts_per_period <= 0:
            return 1.0 if pts_fulfilled > 0 else 0.0
        return pts_fulfilled / pts_per_period

    def overdue_fraction(self, days_since_last: Optional[int], period_length_days: int) -> float:
        """
        How far past the rolling period the last session lies, in periods.

        Zero while still inside the period, then grows linearly. Never-done
        areas get ``NEVER_DONE_OVERDUE``.
        """
        if days_since_last is None:
            return self.NEVER_DONE_OVERDUE
        period = max(period_length_days, 1)
        return max(0.0, (days_since_last - period) / period)

    def priority(self, fulfillment_fraction: float, overdue_fraction: float) -> float:
        """Combine both signals into a single ranking score."""
        unfulfilled = max(0.0, 1 - fulfillment_fraction)
        return unfulfilled * self.UNFULFILLED_WEIGHT + overdue_fraction * self.OVERDUE_WEIGHT

    def round_half_up(self, value: float) -> float:
        """
        Round to ``DECIMALS`` places with exact halves going up.

        The built-in ``round`` sends halves to the even neighbour, so 0.125
        would become 0.12 rather than 0.13.
        """
        scale = 10 ** self.DECIMALS
        return math.floor(value * scale + 0.5) / scale

    def order_exercises(self, exercises: List[SuggestedExercise]) -> List[SuggestedExercise]:
        """Never-done exercises first, then the longest-neglected first."""
        return sorted(
            exercises,
            key=lambda ex: (
                ex.days_since_last is not None,
                -(ex.days_since_last or 0),
            ),
        )

    def _suggest(
        self,
        fa: FocusAreaSnapshot,
        pts_fulfilled: int,
        last_done: Optional[DateLike],
        exercises: Sequence[ExerciseSnapshot],
        exercise_last_done: Mapping[int, Optional[DateLike]],
        today: DateLike,
    ) -> FocusAreaSuggestion:
        if fa.pts_per_period <= 0 or fa.period_length_days <= 0:
            logger.warning(
                f"Focus area {fa.id} ({fa.body_area_name}) has a non-positive target: "
                f"{fa.pts_per_period} pts / {fa.period_length_days} days"
            )

        days_since_last = days_between(last_done, today)
        fulfillment = self.fulfillment_fraction(pts_fulfilled, fa.pts_per_period)
        overdue = self.overdue_fraction(days_since_last, fa.period_length_days)
        priority = self.priority(fulfillment, overdue)

        annotated = [
            SuggestedExercise(
                id=ex.id,
                body_area_id=ex.body_area_id,
                name=ex.name,
                days_since_last=days_between(exercise_last_done.get(ex.id), today),
            )
            for ex in exercises
        ]

        return FocusAreaSuggestion(
            focus_area=SuggestedFocusArea(
                id=fa.id,
                body_area=BodyAreaRef(id=fa.body_area_id, name=fa.body_area_name),
                pts_per_period=fa.pts_per_period,
                pts_type=fa.pts_type,
                period_length_days=fa.period_length_days,
                color_index=fa.color_index,
            ),
            pts_fulfilled=pts_fulfilled,
            days_since_last=days_since_last,
            overdue_fraction=self.round_half_up(overdue),
            fulfillment_fraction=self.round_half_up(fulfillment),
            priority=self.round_half_up(priority),
            exercises=self.order_exercises(annotated),
        )


# Singleton instance for import
suggestion_engine = SuggestionEngine()


def compute_suggestions(
    focus_areas: Sequence[FocusAreaSnapshot],
    fulfillment_by_focus_area: Mapping[int, int],
    last_done_by_body_area: Mapping[int, Optional[DateLike]],
    exercises_by_body_area: Mapping[int, Sequence[ExerciseSnapshot]],
    exercise_last_done: Mapping[int, Optional[DateLike]],
    today: DateLike,
) -> List[FocusAreaSuggestion]:
    """Module-level shortcut for ``suggestion_engine.compute_suggestions``."""
    return suggestion_engine.compute_suggestions(
        focus_areas,
        fulfillment_by_focus_area,
        last_done_by_body_area,
        exercises_by_body_area,
        exercise_last_done,
        today,
    )
