"""Workout plan and focus area models."""

from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.body_area import BodyArea


class PtsType(str, PyEnum):
    """Unit that points are logged in for a focus area."""
    EFFORT = "effort"
    ACTIVE_MINUTES = "active_minutes"


class WorkoutPlan(Base):
    """A user's plan: a named set of focus areas."""

    __tablename__ = "workout_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True)
    name: Mapped[str] = mapped_column(String(255))

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    user: Mapped["User"] = relationship(
        "User", back_populates="plans", foreign_keys=[user_id]
    )
    focus_areas: Mapped[List["FocusArea"]] = relationship(
        "FocusArea", back_populates="plan", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<WorkoutPlan(id={self.id}, name='{self.name}', user_id={self.user_id})>"


class FocusArea(Base):
    """Plan-scoped target for one body area: points per rolling period."""

    __tablename__ = "focus_areas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("workout_plans.id", ondelete="CASCADE"), index=True
    )
    body_area_id: Mapped[int] = mapped_column(Integer, ForeignKey("body_areas.id"), index=True)

    # Target
    pts_per_period: Mapped[int] = mapped_column(Integer)
    pts_type: Mapped[PtsType] = mapped_column(Enum(PtsType), default=PtsType.EFFORT)
    period_length_days: Mapped[int] = mapped_column(Integer)

    # Palette slot used by clients to color this area
    color_index: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Relationships
    plan: Mapped["WorkoutPlan"] = relationship("WorkoutPlan", back_populates="focus_areas")
    body_area: Mapped["BodyArea"] = relationship("BodyArea")

    def __repr__(self) -> str:
        return (
            f"<FocusArea(id={self.id}, plan_id={self.plan_id}, body_area_id={self.body_area_id}, "
            f"{self.pts_per_period} {self.pts_type} / {self.period_length_days}d)>"
        )
