from selfcare.config import DATA_BACKEND
from selfcare.repositories.base import LogRepository
from selfcare.repositories.sql_repository import SqlLogRepository
from selfcare.repositories.supabase_repository import SupabaseLogRepository


def get_log_repository() -> LogRepository:
    """FastAPI dependency — the storage backend selected by DATA_BACKEND."""
    if DATA_BACKEND == "sql":
        return SqlLogRepository()
    return SupabaseLogRepository()


__all__ = [
    "LogRepository",
    "SqlLogRepository",
    "SupabaseLogRepository",
    "get_log_repository",
]
