import datetime as dt
import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Mood(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    OKAY = "okay"
    STRESSED = "stressed"
    SAD = "sad"


NUMERIC_FIELDS = ("water_intake", "sleep_hours", "exercise_minutes", "meditation_minutes")

# Input widget hints: min, max, step. Values outside these are stored as given.
FIELD_RANGES = {
    "water_intake": {"min": 0, "max": 20, "step": 1},
    "sleep_hours": {"min": 0, "max": 24, "step": 0.5},
    "exercise_minutes": {"min": 0, "max": 1440, "step": 1},
    "meditation_minutes": {"min": 0, "max": 1440, "step": 1},
}


def coerce_float(value) -> float:
    """Parse a numeric form value; anything unparseable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def coerce_int(value) -> int:
    return int(coerce_float(value))


class DailyLogForm(BaseModel):
    """Values submitted from the add/edit form."""
    date: dt.date = Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc).date())
    water_intake: int = 0
    sleep_hours: float = 0.0
    exercise_minutes: int = 0
    meditation_minutes: int = 0
    mood: Mood = Mood.OKAY
    notes: str = ""

    @field_validator("water_intake", "exercise_minutes", "meditation_minutes", mode="before")
    @classmethod
    def _coerce_int(cls, value):
        return coerce_int(value)

    @field_validator("sleep_hours", mode="before")
    @classmethod
    def _coerce_float(cls, value):
        return coerce_float(value)

    @field_validator("notes", mode="before")
    @classmethod
    def _notes(cls, value):
        return "" if value is None else value

    def values(self) -> dict:
        """Mutable fields as stored in the daily_logs table."""
        return {
            "water_intake": self.water_intake,
            "sleep_hours": self.sleep_hours,
            "exercise_minutes": self.exercise_minutes,
            "meditation_minutes": self.meditation_minutes,
            "mood": self.mood.value,
            "notes": self.notes,
        }


class DailyLog(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    date: dt.date
    water_intake: int = 0
    sleep_hours: float = 0.0
    exercise_minutes: int = 0
    meditation_minutes: int = 0
    mood: Mood = Mood.OKAY
    notes: str = ""
    created_at: Optional[dt.datetime] = None

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _as_str(cls, value):
        return str(value)

    @field_validator("water_intake", "exercise_minutes", "meditation_minutes", mode="before")
    @classmethod
    def _int_or_zero(cls, value):
        return coerce_int(value)

    @field_validator("sleep_hours", mode="before")
    @classmethod
    def _float_or_zero(cls, value):
        return coerce_float(value)

    @field_validator("notes", mode="before")
    @classmethod
    def _notes(cls, value):
        return "" if value is None else value

    def form_values(self) -> dict:
        return {
            "water_intake": self.water_intake,
            "sleep_hours": self.sleep_hours,
            "exercise_minutes": self.exercise_minutes,
            "meditation_minutes": self.meditation_minutes,
            "mood": self.mood.value,
            "notes": self.notes,
        }
