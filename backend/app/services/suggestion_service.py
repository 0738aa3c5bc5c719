"""Load a user's plan and history, then rank it with the suggestion engine."""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.models.workout_plan import FocusArea
from app.schemas.suggestion import FocusAreaSuggestion
from app.services.clock import local_today
from app.services.history_queries import HistoryService, history_service
from app.services.suggestion_engine import (
    ExerciseSnapshot,
    FocusAreaSnapshot,
    SuggestionEngine,
    suggestion_engine,
)

logger = logging.getLogger(__name__)


class SuggestionService:
    """Bridge between the data store and the pure suggestion engine."""

    def __init__(
        self,
        engine: SuggestionEngine = suggestion_engine,
        history: HistoryService = history_service,
    ):
        self.engine = engine
        self.history = history

    def load_focus_areas(self, db: Session, plan_id: int) -> List[FocusAreaSnapshot]:
        """Snapshot every focus area of a plan, in ID order."""
        rows = db.query(FocusArea).options(
            joinedload(FocusArea.body_area)
        ).filter(
            FocusArea.plan_id == plan_id
        ).order_by(FocusArea.id).all()

        return [
            FocusAreaSnapshot(
                id=fa.id,
                body_area_id=fa.body_area_id,
                body_area_name=fa.body_area.name,
                pts_per_period=fa.pts_per_period,
                period_length_days=fa.period_length_days,
                pts_type=fa.pts_type,
                color_index=fa.color_index,
            )
            for fa in rows
        ]

    def get_suggestions(
        self,
        db: Session,
        user_id: int,
        plan_id: Optional[int],
        today: Optional[date] = None,
    ) -> List[FocusAreaSuggestion]:
        """
        Ranked suggestions for a user's plan.

        Args:
            db: Database session
            user_id: User whose history is scored
            plan_id: Active plan ID; None yields no suggestions
            today: Reference date (defaults to today in the app timezone)

        Returns:
            Focus area suggestions, highest priority first
        """
        if plan_id is None:
            return []

        today = today or local_today()
        focus_areas = self.load_focus_areas(db, plan_id)
        if not focus_areas:
            return []

        body_area_ids = sorted({fa.body_area_id for fa in focus_areas})

        # Each focus area may have its own period length
        fulfillment = {
            fa.id: self.history.points_in_window(
                db, user_id, fa.body_area_id, fa.period_length_days, today
            )
            for fa in focus_areas
        }
        last_done = self.history.last_done_by_body_area(db, user_id, body_area_ids)

        exercises = {
            body_area_id: [
                ExerciseSnapshot(id=ex.id, body_area_id=ex.body_area_id, name=ex.name)
                for ex in group
            ]
            for body_area_id, group in self.history.exercises_by_body_area(db, body_area_ids).items()
        }
        exercise_ids = [ex.id for group in exercises.values() for ex in group]
        exercise_last_done = self.history.last_done_by_exercise(db, user_id, exercise_ids)

        logger.debug(
            f"Computing suggestions for user {user_id}, plan {plan_id}: "
            f"{len(focus_areas)} focus areas, {len(exercise_ids)} exercises"
        )

        return self.engine.compute_suggestions(
            focus_areas,
            fulfillment,
            last_done,
            exercises,
            exercise_last_done,
            today,
        )


# Singleton instance for import
suggestion_service = SuggestionService()
