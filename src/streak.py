"""
Day streak with a weekly rest-day allowance.
"""

import math
from datetime import date, datetime, timedelta

from src.workout_records import session_date


REST_DAYS_PER_WEEK = 2

# Hard cap on the backward walk; a streak never reports more than a year.
MAX_LOOKBACK_DAYS = 365


def week_key(day):
    """
    Return the ``"{year}-W{week}"`` bucket for a calendar date.

    The week number counts from January 4th of the date's year rather than
    following strict ISO-8601, so early-January dates can land in week 0.
    Streak output depends on this exact numbering.
    """
    anchor = date(day.year, 1, 4)
    # Sunday-based weekday of the anchor: Sunday=0 .. Saturday=6
    anchor_weekday = anchor.isoweekday() % 7
    days_since_anchor = (day - anchor).days
    week = math.ceil((days_since_anchor + anchor_weekday + 1) / 7)
    return f"{day.year}-W{week}"


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    return value


def compute_streak(sessions, today=None):
    """
    Count active days walking back from ``today``.

    A day with at least one session extends the streak. A day without one
    uses up a rest day for its week; the third rest day in the same week ends
    the walk without being counted.

    Args:
        sessions: Session rows with a ``created_at`` value
        today: Date to start from (defaults to the local current date)

    Returns:
        Non-negative streak length
    """
    if not sessions:
        return 0

    start = _as_date(today) or date.today()
    workout_days = set()
    for session in sessions:
        day = session_date(session)
        if day is not None:
            workout_days.add(day)

    rest_days_used = {}
    streak = 0

    for offset in range(MAX_LOOKBACK_DAYS):
        current = start - timedelta(days=offset)

        if current in workout_days:
            streak += 1
            continue

        key = week_key(current)
        rest_days_used[key] = rest_days_used.get(key, 0) + 1
        if rest_days_used[key] > REST_DAYS_PER_WEEK:
            break

    return streak
