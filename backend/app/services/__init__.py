"""Services package for business logic."""

from app.services.history_queries import HistoryService, history_service
from app.services.plan_service import PlanService, plan_service
from app.services.suggestion_engine import SuggestionEngine, suggestion_engine
from app.services.suggestion_service import SuggestionService, suggestion_service

__all__ = [
    "HistoryService",
    "history_service",
    "PlanService",
    "plan_service",
    "SuggestionEngine",
    "suggestion_engine",
    "SuggestionService",
    "suggestion_service",
]
