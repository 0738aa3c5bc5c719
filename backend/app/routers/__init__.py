"""API routers package."""

from app.routers import users, plans, workouts, sets, suggestions

__all__ = ["users", "plans", "workouts", "sets", "suggestions"]
