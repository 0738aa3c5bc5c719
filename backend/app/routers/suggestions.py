"""Suggestions API router: what the user should train next."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.users import get_user_or_404
from app.schemas.suggestion import SuggestionsResponse
from app.services.history_queries import active_workout_response, history_service
from app.services.suggestion_service import suggestion_service

router = APIRouter()


@router.get("/users/{user_id}/suggestions", response_model=SuggestionsResponse)
async def get_suggestions(
    user_id: int,
    db: Session = Depends(get_db),
) -> SuggestionsResponse:
    """
    Get the user's focus areas ranked by training priority.

    The user's unfinished workout, if any, is returned alongside so the
    dashboard can render both in one request. Users without an active plan
    get an empty suggestion list.

    Raises:
        HTTPException: 404 if the user does not exist
    """
    user = get_user_or_404(db, user_id)

    active_workout = active_workout_response(history_service.active_workout(db, user.id))
    suggestions = suggestion_service.get_suggestions(db, user.id, user.active_plan_id)

    return SuggestionsResponse(suggestions=suggestions, active_workout=active_workout)
