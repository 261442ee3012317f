"""
history_service.py — History screen
Holds the user's full log list (newest first) and applies confirmed deletes
to it locally instead of re-fetching.
"""

import logging
from datetime import date
from typing import Callable

from selfcare.models import DailyLog
from selfcare.repositories import LogRepository
from selfcare.services.formatting import date_label, mood_emoji

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this log entry?"


class HistoryView:
    def __init__(self, repo: LogRepository, user_id: str):
        self.repo = repo
        self.user_id = user_id
        self.logs: list[DailyLog] = []

    def load(self) -> list[DailyLog]:
        self.logs = self.repo.fetch_all(self.user_id)
        return self.logs

    def delete(self, log_id: str, confirm: Callable[[str], bool]) -> bool:
        """
        Ask `confirm` first; a declined prompt touches nothing.
        On backend failure the error propagates and self.logs is left as it was.
        """
        if not confirm(DELETE_PROMPT):
            return False

        self.repo.delete(self.user_id, log_id)
        self.logs = [log for log in self.logs if log.id != log_id]
        logger.info("Deleted log %s", log_id)
        return True

    def rows(self, today: date) -> list[dict]:
        return [
            {
                **log.model_dump(mode="json"),
                "label": date_label(log.date, today),
                "mood_emoji": mood_emoji(log.mood),
            }
            for log in self.logs
        ]
