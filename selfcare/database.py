import os
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from selfcare.config import DATABASE_URL

logger = logging.getLogger(__name__)

# Only use connect_args if we are using SQLite
engine_args = {}
if DATABASE_URL.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}
else:
    engine_args.update({
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,
    })

try:
    engine = create_engine(DATABASE_URL, **engine_args, echo=False)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
except Exception as e:
    logger.error("Failed to create engine: %s", e)
    raise e

Base = declarative_base()


def init_db(bind=None):
    """Create the data/ directory for SQLite files, then create the daily_logs table."""
    bind = bind or engine
    if str(bind.url).startswith("sqlite:///./"):
        os.makedirs("data", exist_ok=True)

    # Register the table model with Base.metadata
    from selfcare.models.daily_log_record import DailyLogRecord  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database initialized successfully.")
