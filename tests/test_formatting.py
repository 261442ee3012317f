from datetime import date, datetime

from selfcare.models import Mood
from selfcare.services.formatting import date_label, greeting, mood_emoji

TODAY = date(2026, 10, 18)


def test_today_label():
    assert date_label(date(2026, 10, 18), TODAY) == "Today"


def test_yesterday_label():
    assert date_label(date(2026, 10, 17), TODAY) == "Yesterday"


def test_older_dates_use_full_format():
    assert date_label(date(2026, 10, 16), TODAY) == "Friday, Oct 16, 2026"
    assert date_label(date(2025, 12, 31), TODAY) == "Wednesday, Dec 31, 2025"


def test_yesterday_across_month_boundary():
    assert date_label(date(2026, 9, 30), date(2026, 10, 1)) == "Yesterday"


def test_mood_emoji():
    assert mood_emoji(Mood.EXCELLENT) == "😊"
    assert mood_emoji("sad") == "😢"
    assert mood_emoji("unknown") == "😐"


def test_greeting_by_hour():
    assert greeting("Ada", datetime(2026, 10, 18, 9)) == "Good Morning, Ada!"
    assert greeting("Ada", datetime(2026, 10, 18, 12)) == "Good Afternoon, Ada!"
    assert greeting("Ada", datetime(2026, 10, 18, 17)) == "Good Evening, Ada!"
