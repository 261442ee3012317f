from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from selfcare.auth import get_current_user
from selfcare.errors import BackendError
from selfcare.models import DailyLogForm, User
from selfcare.repositories import LogRepository, get_log_repository
from selfcare.services.history_service import DELETE_PROMPT, HistoryView
from selfcare.services.log_service import LogService

router = APIRouter(prefix="/api/v1/logs", tags=["Daily Logs"])


@router.get("")
def list_logs(
    user: User = Depends(get_current_user),
    repo: LogRepository = Depends(get_log_repository),
):
    history = HistoryView(repo, user.id)
    try:
        history.load()
    except BackendError as e:
        raise HTTPException(status_code=502, detail=f"Error fetching logs: {e}")
    return {"status": "success", "data": history.rows(datetime.now(timezone.utc).date())}


@router.get("/form")
def get_log_form(
    day: Optional[date] = Query(None, alias="date"),
    user: User = Depends(get_current_user),
    repo: LogRepository = Depends(get_log_repository),
):
    return {"status": "success", "data": LogService.load_form(repo, user.id, day or datetime.now(timezone.utc).date())}


@router.post("")
def save_log(
    form: DailyLogForm,
    user: User = Depends(get_current_user),
    repo: LogRepository = Depends(get_log_repository),
):
    try:
        result = LogService.save(repo, user.id, form)
    except BackendError as e:
        raise HTTPException(status_code=502, detail=f"Error saving log: {e}")

    return {
        "status": "success",
        "message": result.message,
        "created": result.created,
        "data": result.log.model_dump(mode="json") if result.log else None,
    }


@router.delete("/{log_id}")
def delete_log(
    log_id: str,
    confirm: bool = False,
    user: User = Depends(get_current_user),
    repo: LogRepository = Depends(get_log_repository),
):
    history = HistoryView(repo, user.id)
    try:
        deleted = history.delete(log_id, lambda prompt: confirm)
    except BackendError as e:
        raise HTTPException(status_code=502, detail=f"Error deleting log: {e}")

    if not deleted:
        raise HTTPException(status_code=409, detail=DELETE_PROMPT)
    return {"status": "success", "data": {"id": log_id}}
