"""
log_service.py — Add/Edit form logic
One log per user per date: a submit looks the date up first, then either
inserts a new log or overwrites the existing one in place.
"""

import logging
from dataclasses import dataclass
from datetime import date

from selfcare.errors import BackendError
from selfcare.models import DailyLog, DailyLogForm, Failure, Found
from selfcare.repositories import LogRepository

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    log: DailyLog | None
    created: bool

    @property
    def message(self) -> str:
        return "Log saved successfully!" if self.created else "Log updated successfully!"


class LogService:
    @staticmethod
    def save(repo: LogRepository, user_id: str, form: DailyLogForm) -> SaveResult:
        """
        Upsert the form values for (user_id, form.date).
        Raises BackendError if the lookup or the write fails; nothing is written
        when the lookup fails.
        """
        lookup = repo.fetch_by_date(user_id, form.date)

        if isinstance(lookup, Failure):
            logger.error("Lookup before save failed for %s: %s", form.date, lookup.reason)
            raise BackendError(lookup.reason)

        if isinstance(lookup, Found):
            repo.update(user_id, lookup.record.id, form.values())
            created = False
        else:
            repo.insert(user_id, form.date, form.values())
            created = True

        # Re-read so the caller sees the stored row and switches to edit mode
        refreshed = repo.fetch_by_date(user_id, form.date)
        log = refreshed.record if isinstance(refreshed, Found) else None
        if log is None:
            logger.warning("Saved log for %s could not be re-read: %s", form.date, refreshed)
        return SaveResult(log=log, created=created)

    @staticmethod
    def load_form(repo: LogRepository, user_id: str, day: date) -> dict:
        """Form state for a date: the existing log's values, or blank defaults."""
        lookup = repo.fetch_by_date(user_id, day)

        if isinstance(lookup, Found):
            return {
                "date": day.isoformat(),
                "editing": True,
                "log_id": lookup.record.id,
                "values": lookup.record.form_values(),
            }

        if isinstance(lookup, Failure):
            logger.error("Error checking existing log for %s: %s", day, lookup.reason)

        return {
            "date": day.isoformat(),
            "editing": False,
            "log_id": None,
            "values": DailyLogForm(date=day).values(),
        }
