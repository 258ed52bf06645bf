"""
Tests for activity chart aggregation (daily / weekly / biweekly)
"""
import uuid
from datetime import date, datetime, timedelta

import pytest

from creativityhub.application.activity_analytics import (
    ActivityChartPoint,
    Granularity,
    subtract_months,
    week_start,
)
from creativityhub.domain.activity_log import ActivityActionType, ActivityEntityType

DAY0 = date(2026, 3, 2)  # Monday


def _log(manager, project_id, when: datetime, times: int = 1):
    for _ in range(times):
        assert manager.activity.log(
            project_id, ActivityEntityType.CHECKLIST_ITEM, ActivityActionType.UPDATED, created_at=when
        )


def _at(d: date, hour: int = 12) -> datetime:
    return datetime(d.year, d.month, d.day, hour)


@pytest.fixture
def project_id():
    return uuid.uuid4()


class TestHelpers:
    def test_week_start_is_monday(self):
        assert week_start(date(2026, 3, 4)) == date(2026, 3, 2)
        assert week_start(date(2026, 3, 8)) == date(2026, 3, 2)
        assert week_start(date(2026, 3, 2)) == date(2026, 3, 2)

    def test_subtract_months_clamps_day(self):
        assert subtract_months(date(2026, 3, 31), 1) == date(2026, 2, 28)
        assert subtract_months(date(2024, 3, 31), 1) == date(2024, 2, 29)
        assert subtract_months(date(2026, 1, 15), 2) == date(2025, 11, 15)
        assert subtract_months(date(2026, 7, 10), 6) == date(2026, 1, 10)


class TestDailyActivity:
    def test_scenario_two_active_days(self, manager, project_id):
        _log(manager, project_id, _at(DAY0))
        _log(manager, project_id, _at(DAY0 + timedelta(days=1), 9), times=2)

        points = manager.analytics.daily_activity_counts(
            project_id, days=3, reference_date=DAY0 + timedelta(days=2)
        )

        assert points == [
            ActivityChartPoint(DAY0, 1),
            ActivityChartPoint(DAY0 + timedelta(days=1), 2),
            ActivityChartPoint(DAY0 + timedelta(days=2), 0),
        ]

    def test_between_matches_shorthand(self, manager, project_id):
        _log(manager, project_id, _at(DAY0))
        _log(manager, project_id, _at(DAY0 + timedelta(days=1)), times=2)

        points = manager.analytics.daily_activity_counts_between(project_id, DAY0, DAY0 + timedelta(days=3))

        assert [p.count for p in points] == [1, 2, 0]

    def test_default_window_has_thirty_points(self, manager, project_id):
        points = manager.analytics.daily_activity_counts(project_id, reference_date=DAY0)

        assert len(points) == 30
        assert points[-1].date == DAY0
        assert points[0].date == DAY0 - timedelta(days=29)
        assert all(p.count == 0 for p in points)

    def test_endpoints_are_normalized_to_day_start(self, manager, project_id):
        _log(manager, project_id, _at(DAY0, 8))

        points = manager.analytics.daily_activity_counts_between(
            project_id, _at(DAY0, 15), _at(DAY0 + timedelta(days=2), 1)
        )

        assert points == [ActivityChartPoint(DAY0, 1), ActivityChartPoint(DAY0 + timedelta(days=1), 0)]

    def test_other_projects_are_not_counted(self, manager, project_id):
        _log(manager, uuid.uuid4(), _at(DAY0))

        points = manager.analytics.daily_activity_counts(project_id, days=1, reference_date=DAY0)

        assert points == [ActivityChartPoint(DAY0, 0)]

    def test_non_positive_spans_are_empty(self, manager, project_id):
        assert manager.analytics.daily_activity_counts(project_id, days=0, reference_date=DAY0) == []
        assert manager.analytics.daily_activity_counts_between(project_id, DAY0, DAY0) == []
        assert manager.analytics.daily_activity_counts_between(
            project_id, DAY0, DAY0 - timedelta(days=3)
        ) == []


class TestWeeklyActivity:
    def test_buckets_keyed_by_monday_and_zero_filled(self, manager, project_id):
        _log(manager, project_id, _at(date(2026, 3, 4)))  # Wed, week of 03-02
        _log(manager, project_id, _at(date(2026, 3, 18)), times=3)  # Wed, week of 03-16

        points = manager.analytics.weekly_activity_counts_between(project_id, date(2026, 3, 4), date(2026, 3, 20))

        assert points == [
            ActivityChartPoint(date(2026, 3, 2), 1),
            ActivityChartPoint(date(2026, 3, 9), 0),
            ActivityChartPoint(date(2026, 3, 16), 3),
        ]

    def test_counts_outside_range_are_not_folded(self, manager, project_id):
        _log(manager, project_id, _at(date(2026, 3, 2)))  # same week, before start
        _log(manager, project_id, _at(date(2026, 3, 5)))

        points = manager.analytics.weekly_activity_counts_between(project_id, date(2026, 3, 4), date(2026, 3, 6))

        assert points == [ActivityChartPoint(date(2026, 3, 2), 1)]

    def test_shorthand_covers_months_back_to_reference_week(self, manager, project_id):
        points = manager.analytics.weekly_activity_counts(project_id, months=1, reference_date=date(2026, 3, 18))

        assert [p.date for p in points] == [
            date(2026, 2, 16),
            date(2026, 2, 23),
            date(2026, 3, 2),
            date(2026, 3, 9),
            date(2026, 3, 16),
        ]

    def test_non_positive_months_are_empty(self, manager, project_id):
        assert manager.analytics.weekly_activity_counts(project_id, months=0, reference_date=DAY0) == []


class TestBiweeklyActivity:
    def test_buckets_anchored_at_range_start(self, manager, project_id):
        start = date(2026, 3, 4)
        _log(manager, project_id, _at(start))
        _log(manager, project_id, _at(start + timedelta(days=13)), times=2)
        _log(manager, project_id, _at(start + timedelta(days=14)), times=4)

        points = manager.analytics.biweekly_activity_counts_between(project_id, start, start + timedelta(days=20))

        assert points == [
            ActivityChartPoint(start, 3),
            ActivityChartPoint(start + timedelta(days=14), 4),
        ]

    def test_shorthand_last_bucket_covers_reference_week(self, manager, project_id):
        reference = date(2026, 3, 18)
        _log(manager, project_id, _at(reference))

        points = manager.analytics.biweekly_activity_counts(project_id, months=1, reference_date=reference)

        assert [p.date for p in points] == [date(2026, 2, 16), date(2026, 3, 2), date(2026, 3, 16)]
        assert points[-1].count == 1


class TestAggregationProperties:
    START = date(2026, 1, 7)
    END = date(2026, 3, 19)

    @pytest.fixture
    def spread(self, manager, project_id):
        d = self.START - timedelta(days=5)
        step = 0
        while d < self.END + timedelta(days=5):
            _log(manager, project_id, _at(d, step % 24), times=step % 3 + 1)
            d += timedelta(days=3)
            step += 1
        return project_id

    def test_granularities_sum_to_same_total(self, manager, spread):
        daily = manager.analytics.daily_activity_counts_between(spread, self.START, self.END)
        weekly = manager.analytics.weekly_activity_counts_between(spread, self.START, self.END)
        biweekly = manager.analytics.biweekly_activity_counts_between(spread, self.START, self.END)

        total = sum(p.count for p in daily)
        assert total > 0
        assert sum(p.count for p in weekly) == total
        assert sum(p.count for p in biweekly) == total
        assert len(daily) == (self.END - self.START).days

    def test_series_are_ordered_by_date(self, manager, spread):
        for granularity in Granularity:
            points = manager.analytics.activity_counts(spread, granularity, self.START, self.END)
            dates = [p.date for p in points]
            assert dates == sorted(dates)
            assert len(set(dates)) == len(dates)

    def test_repeated_calls_are_identical(self, manager, spread):
        first = manager.analytics.activity_counts(spread, Granularity.WEEKLY, self.START, self.END)
        second = manager.analytics.activity_counts(spread, Granularity.WEEKLY, self.START, self.END)

        assert first == second

    def test_dispatch(self, manager, spread):
        analytics = manager.analytics
        assert analytics.activity_counts(spread, Granularity.DAILY, self.START, self.END) == \
            analytics.daily_activity_counts_between(spread, self.START, self.END)
        assert analytics.activity_counts(spread, Granularity.BIWEEKLY, self.START, self.END) == \
            analytics.biweekly_activity_counts_between(spread, self.START, self.END)
