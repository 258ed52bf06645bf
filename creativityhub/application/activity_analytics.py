"""
Activity analytics - zero-filled activity series for a project's chart.

Raw per-day counts come from the activity log repository (one GROUP BY
query per call); this module folds them into daily, weekly (Monday-based)
or 14-day buckets. Only activity inside the requested ``[start, end)`` range
is counted, so the three granularities over one range add up to the same
total.
"""
from __future__ import annotations

import calendar
import uuid
from datetime import date, datetime, timedelta
from enum import Enum
from typing import NamedTuple

from creativityhub.infrastructure.repositories.activity_logs import ActivityLogRepository

BIWEEK_DAYS = 14


class Granularity(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"


class ActivityChartPoint(NamedTuple):
    date: date
    count: int


def _day(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def week_start(d: date) -> date:
    """Monday of the ISO week containing ``d``."""
    return d - timedelta(days=d.weekday())


def subtract_months(d: date, months: int) -> date:
    """Same day ``months`` earlier, clamped to the target month's length."""
    total = d.year * 12 + (d.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


class ActivityAnalyticsService:
    def __init__(self, activity_logs: ActivityLogRepository):
        self.activity_logs = activity_logs

    # ------------------------------------------------------------------
    # Explicit ranges
    # ------------------------------------------------------------------

    def daily_activity_counts_between(
        self, project_id: uuid.UUID, start: date | datetime, end: date | datetime
    ) -> list[ActivityChartPoint]:
        start, end = _day(start), _day(end)
        if end <= start:
            return []
        counts = self.activity_logs.fetch_daily_counts_by_project_id(project_id, start, end)
        return [
            ActivityChartPoint(d, counts.get(d, 0))
            for d in (start + timedelta(days=i) for i in range((end - start).days))
        ]

    def weekly_activity_counts_between(
        self, project_id: uuid.UUID, start: date | datetime, end: date | datetime
    ) -> list[ActivityChartPoint]:
        start, end = _day(start), _day(end)
        if end <= start:
            return []
        counts = self.activity_logs.fetch_daily_counts_by_project_id(project_id, start, end)

        first = week_start(start)
        last = week_start(end - timedelta(days=1))
        buckets: dict[date, int] = {}
        cursor = first
        while cursor <= last:
            buckets[cursor] = 0
            cursor += timedelta(days=7)

        for day, count in counts.items():
            key = week_start(day)
            if key in buckets:
                buckets[key] += count

        return [ActivityChartPoint(d, c) for d, c in buckets.items()]

    def biweekly_activity_counts_between(
        self, project_id: uuid.UUID, start: date | datetime, end: date | datetime
    ) -> list[ActivityChartPoint]:
        start, end = _day(start), _day(end)
        if end <= start:
            return []
        counts = self.activity_logs.fetch_daily_counts_by_project_id(project_id, start, end)

        span = (end - start).days
        bucket_count = -(-span // BIWEEK_DAYS)
        totals = [0] * bucket_count
        for day, count in counts.items():
            index = (day - start).days // BIWEEK_DAYS
            if 0 <= index < bucket_count:
                totals[index] += count

        return [
            ActivityChartPoint(start + timedelta(days=i * BIWEEK_DAYS), total)
            for i, total in enumerate(totals)
        ]

    def activity_counts(
        self,
        project_id: uuid.UUID,
        granularity: Granularity,
        start: date | datetime,
        end: date | datetime,
    ) -> list[ActivityChartPoint]:
        if granularity == Granularity.DAILY:
            return self.daily_activity_counts_between(project_id, start, end)
        if granularity == Granularity.WEEKLY:
            return self.weekly_activity_counts_between(project_id, start, end)
        return self.biweekly_activity_counts_between(project_id, start, end)

    # ------------------------------------------------------------------
    # Shorthand ranges ending at the reference date
    # ------------------------------------------------------------------

    def daily_activity_counts(
        self,
        project_id: uuid.UUID,
        days: int = 30,
        reference_date: date | datetime | None = None,
    ) -> list[ActivityChartPoint]:
        """The last ``days`` calendar days, reference day included."""
        if days <= 0:
            return []
        today = _day(reference_date or date.today())
        start = today - timedelta(days=days - 1)
        return self.daily_activity_counts_between(project_id, start, today + timedelta(days=1))

    def weekly_activity_counts(
        self,
        project_id: uuid.UUID,
        months: int = 6,
        reference_date: date | datetime | None = None,
    ) -> list[ActivityChartPoint]:
        if months <= 0:
            return []
        today = _day(reference_date or date.today())
        start = week_start(subtract_months(today, months))
        end = week_start(today) + timedelta(days=7)
        return self.weekly_activity_counts_between(project_id, start, end)

    def biweekly_activity_counts(
        self,
        project_id: uuid.UUID,
        months: int = 6,
        reference_date: date | datetime | None = None,
    ) -> list[ActivityChartPoint]:
        """
        14-day buckets from the week ``months`` back; the last bucket covers
        the reference week.
        """
        if months <= 0:
            return []
        today = _day(reference_date or date.today())
        start = week_start(subtract_months(today, months))
        last_start = week_start(today)
        bucket_count = (last_start - start).days // BIWEEK_DAYS + 1
        end = start + timedelta(days=bucket_count * BIWEEK_DAYS)
        return self.biweekly_activity_counts_between(project_id, start, end)
