from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from selfcare.auth import get_current_user
from selfcare.models import FIELD_RANGES, Mood, User
from selfcare.repositories import LogRepository, get_log_repository
from selfcare.services.dashboard_service import DashboardService
from selfcare.services.formatting import mood_emoji

router = APIRouter(prefix="/api/v1", tags=["Dashboard"])

PAGES = [
    {"key": "dashboard", "label": "Dashboard"},
    {"key": "add-log", "label": "Add Log"},
    {"key": "history", "label": "History"},
]


@router.get("/dashboard")
def dashboard(
    user: User = Depends(get_current_user),
    repo: LogRepository = Depends(get_log_repository),
):
    return {"status": "success", "data": DashboardService.build(repo, user, datetime.now(timezone.utc))}


@router.get("/meta/pages")
def pages():
    """Navigation and form metadata for clients."""
    return {
        "status": "success",
        "data": {
            "pages": PAGES,
            "field_ranges": FIELD_RANGES,
            "moods": [{"value": m.value, "label": m.value.capitalize(), "emoji": mood_emoji(m)} for m in Mood],
            "default_mood": Mood.OKAY.value,
        },
    }
