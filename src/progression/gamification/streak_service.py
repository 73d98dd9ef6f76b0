"""Day-based streak tracking.

A streak counts consecutive calendar days (UTC) with at least one activity.
compute_streak() must be fed the *pre-update* last-active date exactly once
per session; the caller advances last_active_date to today in the same write.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def get_today(now: datetime | None = None) -> date:
    """Calendar date in UTC for ``now`` (defaults to the current time)."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).date()


def compute_streak(last_active: date | None, current_streak: int, today: date) -> int:
    """New streak length after activity on ``today``.

    Same day -> unchanged; yesterday -> +1; anything else -> 1.
    """
    if last_active == today:
        return current_streak
    if last_active is not None and last_active == today - timedelta(days=1):
        return current_streak + 1
    return 1


def effective_streak(last_active: date | None, current_streak: int, today: date) -> int:
    """Streak as it stands right now, without recording activity.

    A streak whose last activity is older than yesterday has lapsed and reads 0.
    """
    if last_active is None:
        return 0
    if last_active in (today, today - timedelta(days=1)):
        return current_streak
    return 0


def completes_weekend(last_active: date | None, today: date) -> bool:
    """True when activity on ``today`` (a Sunday) follows activity on Saturday."""
    return (
        last_active is not None
        and today.weekday() == 6
        and last_active == today - timedelta(days=1)
    )
