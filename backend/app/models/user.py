"""User model for people logging workouts."""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base

if TYPE_CHECKING:
    from app.models.workout_plan import WorkoutPlan
    from app.models.workout import Workout


class User(Base):
    """User model with an optional active workout plan."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255))

    # The plan whose focus areas drive suggestions. users <-> workout_plans
    # reference each other, so this FK is emitted after both tables exist.
    active_plan_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("workout_plans.id", use_alter=True, name="fk_users_active_plan"),
        nullable=True,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    plans: Mapped[List["WorkoutPlan"]] = relationship(
        "WorkoutPlan",
        back_populates="user",
        foreign_keys="WorkoutPlan.user_id",
        cascade="all, delete-orphan",
        order_by="WorkoutPlan.id",
    )
    workouts: Mapped[List["Workout"]] = relationship(
        "Workout", back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name='{self.name}', active_plan_id={self.active_plan_id})>"
