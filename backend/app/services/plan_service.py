"""Workout plan construction: focus area rows and palette slot assignment."""

import logging
from typing import Iterable, List, Optional, Set

from sqlalchemy.orm import Session

from app.models.body_area import BodyArea
from app.models.workout_plan import FocusArea, WorkoutPlan
from app.schemas.plans import FocusAreaCreate, FocusAreaResponse, WorkoutPlanResponse

logger = logging.getLogger(__name__)


class UnknownBodyAreaError(ValueError):
    """Raised when a focus area references a body area that does not exist."""

    def __init__(self, body_area_id: int):
        super().__init__(f"Body area {body_area_id} not found")
        self.body_area_id = body_area_id


class PlanService:
    """Build and replace the focus areas of a workout plan."""

    PALETTE_SIZE = 12

    def next_color_index(self, used: Set[int], assigned_count: int) -> int:
        """
        Lowest palette slot not yet used in the plan.

        Once every slot is taken, slots are reused round-robin.
        """
        for slot in range(self.PALETTE_SIZE):
            if slot not in used:
                return slot
        return assigned_count % self.PALETTE_SIZE

    def build_focus_areas(
        self,
        db: Session,
        focus_areas: Iterable[FocusAreaCreate],
    ) -> List[FocusArea]:
        """
        Create (unsaved) focus area rows, assigning colors where none were given.

        Raises:
            UnknownBodyAreaError: If a body area ID does not exist
        """
        focus_areas = list(focus_areas)
        requested_ids = {fa.body_area_id for fa in focus_areas}
        known_ids = {
            row.id for row in db.query(BodyArea.id).filter(BodyArea.id.in_(requested_ids)).all()
        } if requested_ids else set()

        for fa in focus_areas:
            if fa.body_area_id not in known_ids:
                raise UnknownBodyAreaError(fa.body_area_id)

        used: Set[int] = {fa.color_index for fa in focus_areas if fa.color_index is not None}
        rows: List[FocusArea] = []
        for position, fa in enumerate(focus_areas):
            color_index: Optional[int] = fa.color_index
            if color_index is None:
                color_index = self.next_color_index(used, position)
                used.add(color_index)

            rows.append(FocusArea(
                body_area_id=fa.body_area_id,
                pts_per_period=fa.pts_per_period,
                pts_type=fa.pts_type,
                period_length_days=fa.period_length_days,
                color_index=color_index,
            ))
        return rows

    def replace_focus_areas(
        self,
        db: Session,
        plan: WorkoutPlan,
        focus_areas: Iterable[FocusAreaCreate],
    ) -> None:
        """Swap all of a plan's focus areas for new ones. Caller commits."""
        new_rows = self.build_focus_areas(db, focus_areas)
        plan.focus_areas.clear()
        db.flush()
        plan.focus_areas.extend(new_rows)
        logger.debug(f"Plan {plan.id} now has {len(new_rows)} focus areas")


def plan_response(plan: WorkoutPlan) -> WorkoutPlanResponse:
    """Serialize a plan with its focus areas ordered by body area name."""
    focus_areas = sorted(plan.focus_areas, key=lambda fa: (fa.body_area.name, fa.id))
    return WorkoutPlanResponse(
        id=plan.id,
        user_id=plan.user_id,
        name=plan.name,
        created_at=plan.created_at,
        focus_areas=[
            FocusAreaResponse(
                id=fa.id,
                plan_id=fa.plan_id,
                body_area_id=fa.body_area_id,
                body_area_name=fa.body_area.name,
                pts_per_period=fa.pts_per_period,
                pts_type=fa.pts_type,
                period_length_days=fa.period_length_days,
                color_index=fa.color_index,
            )
            for fa in focus_areas
        ],
    )


# Singleton instance for import
plan_service = PlanService()
