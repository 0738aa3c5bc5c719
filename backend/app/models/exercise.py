"""Exercise model."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base

if TYPE_CHECKING:
    from app.models.body_area import BodyArea


class Exercise(Base):
    """An exercise belonging to exactly one body area."""

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    body_area_id: Mapped[int] = mapped_column(Integer, ForeignKey("body_areas.id"), index=True)
    name: Mapped[str] = mapped_column(String(255))

    # Relationships
    body_area: Mapped["BodyArea"] = relationship("BodyArea", back_populates="exercises")

    def __repr__(self) -> str:
        return f"<Exercise(id={self.id}, name='{self.name}', body_area_id={self.body_area_id})>"
