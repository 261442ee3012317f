from selfcare.models.user import User
from selfcare.models.daily_log import (
    DailyLog,
    DailyLogForm,
    FIELD_RANGES,
    Mood,
    NUMERIC_FIELDS,
)
from selfcare.models.lookup import Failure, Found, LookupResult, NotFound

__all__ = [
    "User",
    "DailyLog",
    "DailyLogForm",
    "FIELD_RANGES",
    "Mood",
    "NUMERIC_FIELDS",
    "Failure",
    "Found",
    "LookupResult",
    "NotFound",
]
