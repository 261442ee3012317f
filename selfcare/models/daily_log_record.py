import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Float, Text, Date, DateTime, Index
from selfcare.database import Base


class DailyLogRecord(Base):
    __tablename__ = "daily_logs"

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    user_id = Column(String(64), nullable=False)
    date = Column(Date, nullable=False)
    water_intake = Column(Integer, nullable=False, default=0)  # glasses
    sleep_hours = Column(Float, nullable=False, default=0.0)
    exercise_minutes = Column(Integer, nullable=False, default=0)
    meditation_minutes = Column(Integer, nullable=False, default=0)
    mood = Column(String(16), nullable=False, default="okay")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # One row per (user_id, date) is kept by the upsert in LogService, not by a constraint
    __table_args__ = (
        Index("ix_daily_logs_user_date", "user_id", "date"),
    )
