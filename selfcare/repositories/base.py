from abc import ABC, abstractmethod
from datetime import date

from selfcare.models import DailyLog, LookupResult


class LogRepository(ABC):
    """Daily log storage. Every call is scoped to one user's rows."""

    @abstractmethod
    def fetch_by_date(self, user_id: str, day: date) -> LookupResult:
        ...

    @abstractmethod
    def fetch_since(self, user_id: str, since: date) -> list[DailyLog]:
        """Logs dated on or after `since`, newest first."""

    @abstractmethod
    def fetch_all(self, user_id: str) -> list[DailyLog]:
        """Full history, newest first."""

    @abstractmethod
    def insert(self, user_id: str, day: date, values: dict) -> DailyLog:
        ...

    @abstractmethod
    def update(self, user_id: str, log_id: str, values: dict) -> DailyLog:
        ...

    @abstractmethod
    def delete(self, user_id: str, log_id: str) -> None:
        ...
