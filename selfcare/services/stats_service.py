"""
stats_service.py — 7-day rolling averages over daily logs.
Pure reductions: no IO, input order does not matter, every log counts once.
"""

from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from selfcare.models import DailyLog, NUMERIC_FIELDS

WINDOW_DAYS = 7


class StatsService:
    @staticmethod
    def window_start(today: date) -> date:
        """First date of the weekly window; the window includes this day and today."""
        return today - timedelta(days=WINDOW_DAYS)

    @staticmethod
    def weekly_average(logs: Iterable[DailyLog], field: str) -> int:
        """Mean of `field` rounded half away from zero, 0 for no logs."""
        if field not in NUMERIC_FIELDS:
            raise ValueError(f"Not a numeric daily log field: {field}")

        logs = list(logs)
        if not logs:
            return 0
        total = sum(Decimal(str(getattr(log, field) or 0)) for log in logs)
        mean = total / len(logs)
        return int(mean.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @staticmethod
    def weekly_summary(logs: Iterable[DailyLog]) -> dict:
        logs = list(logs)
        return {
            "entries": len(logs),
            "averages": {field: StatsService.weekly_average(logs, field) for field in NUMERIC_FIELDS},
        }
