"""Outcome of looking up a daily log by its natural key (user_id, date)."""
from dataclasses import dataclass
from typing import Union

from selfcare.models.daily_log import DailyLog


@dataclass(frozen=True)
class Found:
    record: DailyLog


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Failure:
    reason: str


LookupResult = Union[Found, NotFound, Failure]
