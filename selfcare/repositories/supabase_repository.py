"""
supabase_repository.py — daily_logs over PostgREST.
"""
import logging
from datetime import date

from selfcare.config import DAILY_LOGS_TABLE
from selfcare.errors import BackendError
from selfcare.models import DailyLog, Failure, Found, LookupResult, NotFound
from selfcare.repositories.base import LogRepository
from selfcare.supabase_rest import (
    SingleRowError,
    sb_delete,
    sb_insert,
    sb_select,
    sb_select_single,
    sb_update,
)

logger = logging.getLogger(__name__)


class SupabaseLogRepository(LogRepository):
    def __init__(self, table: str = DAILY_LOGS_TABLE):
        self.table = table

    def fetch_by_date(self, user_id: str, day: date) -> LookupResult:
        try:
            row = sb_select_single(self.table, {"user_id": user_id, "date": day.isoformat()})
        except SingleRowError as e:
            if e.row_count == 0:
                return NotFound()
            logger.warning("Expected one log for user %s on %s, got %s", user_id, day, e.row_count)
            return Failure(str(e))
        except BackendError as e:
            return Failure(str(e))
        return Found(DailyLog(**row))

    def fetch_since(self, user_id: str, since: date) -> list[DailyLog]:
        rows = sb_select(
            self.table,
            filters={"user_id": user_id},
            query_string=f"date=gte.{since.isoformat()}&order=date.desc",
        )
        return [DailyLog(**row) for row in rows]

    def fetch_all(self, user_id: str) -> list[DailyLog]:
        rows = sb_select(self.table, filters={"user_id": user_id}, query_string="order=date.desc")
        return [DailyLog(**row) for row in rows]

    def insert(self, user_id: str, day: date, values: dict) -> DailyLog:
        row = sb_insert(self.table, {"user_id": user_id, "date": day.isoformat(), **values})
        if not row:
            raise BackendError("Insert returned no row")
        return DailyLog(**row)

    def update(self, user_id: str, log_id: str, values: dict) -> DailyLog:
        row = sb_update(self.table, {"id": log_id, "user_id": user_id}, values)
        if not row:
            raise BackendError("Log not found")
        return DailyLog(**row)

    def delete(self, user_id: str, log_id: str) -> None:
        sb_delete(self.table, {"id": log_id, "user_id": user_id})
