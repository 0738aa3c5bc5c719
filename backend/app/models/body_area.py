"""Body area model: a trainable region or category such as "Back" or "Cardio"."""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base

if TYPE_CHECKING:
    from app.models.exercise import Exercise


class BodyArea(Base):
    """Reference data: a body area exercises and focus areas point at."""

    __tablename__ = "body_areas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), unique=True)

    # Relationships
    exercises: Mapped[List["Exercise"]] = relationship(
        "Exercise", back_populates="body_area", order_by="Exercise.name"
    )

    def __repr__(self) -> str:
        return f"<BodyArea(id={self.id}, name='{self.name}')>"
