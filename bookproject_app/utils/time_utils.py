"""
Calendar helpers for the reading goal.
Dates are stored in UTC; "today" and the week number are resolved in the user's timezone.
"""
from datetime import date, datetime, timezone
from typing import Optional

import pytz
from flask import current_app, has_app_context
from flask_login import current_user


def utcnow() -> datetime:
    """Current timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def _resolve_timezone(user=None):
    tz_name = 'UTC'
    if has_app_context():
        tz_name = current_app.config.get('SYSTEM_TIMEZONE', 'UTC')

        target_user = user or current_user
        if target_user and getattr(target_user, 'is_authenticated', False):
            user_tz = getattr(target_user, 'timezone', None)
            if user_tz:
                tz_name = user_tz
    elif user is not None and getattr(user, 'timezone', None):
        tz_name = user.timezone

    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return pytz.UTC


def user_today(user=None, now: Optional[datetime] = None) -> date:
    """
    Today's date as seen by the user.

    Args:
        user: The user object (optional). If None, tries current_user.
        now: Reference instant, defaults to utcnow(). Naive values are taken as UTC.
    """
    now = now or utcnow()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(_resolve_timezone(user)).date()


def week_of_year(day: date) -> int:
    """ISO-8601 week number of ``day`` (1..53)."""
    return day.isocalendar()[1]


def week_of_calendar_year(day: date, weeks_in_year: int = 52) -> int:
    """
    ISO week of ``day`` clamped to the calendar year ``day`` belongs to.
    Early-January days still in the previous ISO year count as week 1;
    late-December days already in the next ISO year count as ``weeks_in_year``.
    """
    iso_year, week, _ = day.isocalendar()
    if iso_year < day.year:
        return 1
    if iso_year > day.year:
        return weeks_in_year
    return min(week, weeks_in_year)


def current_week_of_year(user=None, now: Optional[datetime] = None, weeks_in_year: int = 52) -> int:
    return week_of_calendar_year(user_today(user, now), weeks_in_year)
