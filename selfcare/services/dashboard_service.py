"""
dashboard_service.py — Dashboard screen
Today's entry next to the 7-day averages. Read failures are logged and shown
as empty sections rather than failing the whole page.
"""

import logging
from datetime import datetime

from selfcare.errors import BackendError
from selfcare.models import Failure, Found, User
from selfcare.repositories import LogRepository
from selfcare.services.formatting import greeting, mood_emoji
from selfcare.services.stats_service import StatsService

logger = logging.getLogger(__name__)


class DashboardService:
    @staticmethod
    def build(repo: LogRepository, user: User, now: datetime) -> dict:
        today = now.date()

        today_log = None
        lookup = repo.fetch_by_date(user.id, today)
        if isinstance(lookup, Found):
            today_log = {**lookup.record.model_dump(mode="json"), "mood_emoji": mood_emoji(lookup.record.mood)}
        elif isinstance(lookup, Failure):
            logger.error("Error fetching today log: %s", lookup.reason)

        try:
            week = repo.fetch_since(user.id, StatsService.window_start(today))
        except BackendError as e:
            logger.error("Error fetching weekly stats: %s", e)
            week = []

        return {
            "greeting": greeting(user.name, now),
            "date": today.isoformat(),
            "today": today_log,
            "weekly": StatsService.weekly_summary(week),
        }
