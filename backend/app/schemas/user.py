"""Pydantic schemas for user API operations."""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.common import CamelModel


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field(..., max_length=255, description="Display name")


class ActivePlanUpdate(CamelModel):
    """Schema for selecting (or clearing) a user's active plan."""

    plan_id: Optional[int] = Field(None, description="Plan to activate, or null to clear")


class UserResponse(BaseModel):
    """Schema for user API responses."""

    id: int = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    active_plan_id: Optional[int] = Field(None, description="Active plan ID")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "PJ",
                "active_plan_id": 1
            }
        }
