"""
sql_repository.py — daily_logs in a local SQL database through SQLAlchemy.
Used for development without a Supabase project (DATA_BACKEND=sql).
"""
import logging
from datetime import date

from sqlalchemy.exc import MultipleResultsFound, NoResultFound, SQLAlchemyError

from selfcare.database import SessionLocal
from selfcare.errors import BackendError
from selfcare.models import DailyLog, Failure, Found, LookupResult, NotFound
from selfcare.models.daily_log_record import DailyLogRecord
from selfcare.repositories.base import LogRepository

logger = logging.getLogger(__name__)


class SqlLogRepository(LogRepository):
    def __init__(self, session_factory=SessionLocal):
        self._session_factory = session_factory

    def fetch_by_date(self, user_id: str, day: date) -> LookupResult:
        with self._session_factory() as db:
            try:
                row = db.query(DailyLogRecord).filter_by(user_id=user_id, date=day).one()
            except NoResultFound:
                return NotFound()
            except MultipleResultsFound:
                logger.warning("More than one log for user %s on %s", user_id, day)
                return Failure(f"Multiple logs found for {day.isoformat()}")
            except SQLAlchemyError as e:
                logger.error("Lookup failed: %s", e)
                return Failure(str(e))
            return Found(DailyLog.model_validate(row))

    def fetch_since(self, user_id: str, since: date) -> list[DailyLog]:
        with self._session_factory() as db:
            try:
                rows = (
                    db.query(DailyLogRecord)
                    .filter(DailyLogRecord.user_id == user_id, DailyLogRecord.date >= since)
                    .order_by(DailyLogRecord.date.desc())
                    .all()
                )
            except SQLAlchemyError as e:
                raise BackendError(str(e)) from e
            return [DailyLog.model_validate(r) for r in rows]

    def fetch_all(self, user_id: str) -> list[DailyLog]:
        with self._session_factory() as db:
            try:
                rows = (
                    db.query(DailyLogRecord)
                    .filter(DailyLogRecord.user_id == user_id)
                    .order_by(DailyLogRecord.date.desc())
                    .all()
                )
            except SQLAlchemyError as e:
                raise BackendError(str(e)) from e
            return [DailyLog.model_validate(r) for r in rows]

    def insert(self, user_id: str, day: date, values: dict) -> DailyLog:
        with self._session_factory() as db:
            try:
                record = DailyLogRecord(user_id=user_id, date=day, **values)
                db.add(record)
                db.commit()
                db.refresh(record)
                return DailyLog.model_validate(record)
            except (SQLAlchemyError, OverflowError) as e:
                db.rollback()
                raise BackendError(str(e)) from e

    def update(self, user_id: str, log_id: str, values: dict) -> DailyLog:
        with self._session_factory() as db:
            try:
                record = db.query(DailyLogRecord).filter_by(id=log_id, user_id=user_id).first()
                if record is None:
                    raise BackendError("Log not found")
                for field, value in values.items():
                    setattr(record, field, value)
                db.commit()
                db.refresh(record)
                return DailyLog.model_validate(record)
            except (SQLAlchemyError, OverflowError) as e:
                db.rollback()
                raise BackendError(str(e)) from e

    def delete(self, user_id: str, log_id: str) -> None:
        with self._session_factory() as db:
            try:
                db.query(DailyLogRecord).filter_by(id=log_id, user_id=user_id).delete()
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise BackendError(str(e)) from e
