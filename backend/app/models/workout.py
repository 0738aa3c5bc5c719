"""Workout and set models for logged training sessions."""

from datetime import date as date_type
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, Date, DateTime, Boolean, ForeignKey, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.exercise import Exercise


class Workout(Base):
    """A training session. Starts unfinished, becomes finished exactly once."""

    __tablename__ = "workouts"
    __table_args__ = (
        # At most one unfinished workout per user
        Index(
            "uq_workouts_one_active_per_user",
            "user_id",
            unique=True,
            sqlite_where=text("NOT finished"),
            postgresql_where=text("NOT finished"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True)

    # Calendar date the workout counts for; editable after finishing
    workout_date: Mapped[date_type] = mapped_column(Date, index=True)

    started_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    finished: Mapped[bool] = mapped_column(Boolean, default=False)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="workouts")
    sets: Mapped[List["WorkoutSet"]] = relationship(
        "WorkoutSet",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutSet.id",
    )

    def __repr__(self) -> str:
        return (
            f"<Workout(id={self.id}, user_id={self.user_id}, "
            f"date={self.workout_date}, finished={self.finished})>"
        )


class WorkoutSet(Base):
    """Points earned on one exercise within a workout."""

    __tablename__ = "sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    workout_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("workouts.id", ondelete="CASCADE"), index=True
    )
    exercise_id: Mapped[int] = mapped_column(Integer, ForeignKey("exercises.id"), index=True)
    pts: Mapped[int] = mapped_column(Integer, default=0)

    # Relationships
    workout: Mapped["Workout"] = relationship("Workout", back_populates="sets")
    exercise: Mapped["Exercise"] = relationship("Exercise")

    def __repr__(self) -> str:
        return f"<WorkoutSet(id={self.id}, workout_id={self.workout_id}, exercise_id={self.exercise_id}, pts={self.pts})>"
