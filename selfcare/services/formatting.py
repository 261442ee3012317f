from datetime import date, datetime, timedelta

MOOD_EMOJI = {
    "excellent": "😊",
    "good": "🙂",
    "okay": "😐",
    "stressed": "😰",
    "sad": "😢",
}


def mood_emoji(mood) -> str:
    value = getattr(mood, "value", mood)
    return MOOD_EMOJI.get(value, MOOD_EMOJI["okay"])


def date_label(day: date, today: date) -> str:
    """'Today', 'Yesterday', or e.g. 'Wednesday, Oct 14, 2026'."""
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return f"{day.strftime('%A')}, {day.strftime('%b')} {day.day}, {day.year}"


def greeting(name: str, now: datetime) -> str:
    if now.hour < 12:
        part = "Morning"
    elif now.hour < 17:
        part = "Afternoon"
    else:
        part = "Evening"
    return f"Good {part}, {name}!"
