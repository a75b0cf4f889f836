"""
Unit tests for the mood analytics engine.
"""
import random

import pytest

from moodbot.utils import compute_analytics, generate_sample_data
from moodbot.utils.analytics import (
    daily_averages,
    hourly_distribution,
    mood_distribution,
    weekly_analysis,
)

pytestmark = pytest.mark.unit


class TestComputeAnalytics:
    """Snapshot-level behaviour."""

    def test_empty_records_give_empty_snapshot(self, today):
        snapshot = compute_analytics([], today=today)

        assert snapshot.model_dump(by_alias=True) == {
            "dailyAverages": [],
            "weeklyAnalysis": None,
            "moodDistribution": [],
            "hourlyDistribution": [],
        }

    def test_single_record_populates_every_view(self, make_record, today):
        snapshot = compute_analytics([make_record("neutral", time="14:30")], today=today)

        assert len(snapshot.daily_averages) == 1
        assert snapshot.weekly_analysis is not None
        assert snapshot.weekly_analysis.total_entries == 1
        assert [item.label for item in snapshot.mood_distribution] == ["Neutral"]
        assert snapshot.model_dump(by_alias=True)["hourlyDistribution"] == [
            {"hour": 14, "count": 1, "avgMood": 3, "timeLabel": "14:00"}
        ]

    def test_is_idempotent(self, make_record, today):
        records = [
            make_record("happy", days_ago=1, time="09:15"),
            make_record("sad", days_ago=1, time="18:40"),
            make_record("tired", days_ago=9, time="07:05"),
        ]

        first = compute_analytics(records, today=today)
        second = compute_analytics(records, today=today)

        assert first == second

    def test_result_does_not_depend_on_storage_order(self, make_record, today):
        records = [
            make_record("happy", time="09:00"),
            make_record("sad", time="10:00"),
            make_record("sad", days_ago=3, time="11:00"),
            make_record("happy", days_ago=4, time="12:00"),
        ]

        assert compute_analytics(records, today=today) == compute_analytics(list(reversed(records)), today=today)

    def test_records_outside_current_week_still_get_weekly_analysis(self, make_record, today):
        snapshot = compute_analytics([make_record("sad", days_ago=20)], today=today)

        weekly = snapshot.weekly_analysis
        assert weekly is not None
        assert weekly.current_week_avg == 0
        assert weekly.previous_week_avg == 0
        assert weekly.trend == "stable"
        assert weekly.dominant_mood is None
        assert weekly.total_entries == 0
        assert weekly.mood_counts == {}

    def test_properties_hold_for_sample_history(self, today):
        records = generate_sample_data("user-1", today=today, rng=random.Random(42))
        snapshot = compute_analytics(records, today=today)

        assert all(1 <= day.average <= 5 for day in snapshot.daily_averages)
        for day in snapshot.daily_averages:
            assert day.count == sum(1 for record in records if record.date == day.date)

        assert all(item.value > 0 for item in snapshot.mood_distribution)
        assert sum(item.value for item in snapshot.mood_distribution) == len(records)

        assert sum(bucket.count for bucket in snapshot.hourly_distribution) == len(records)
        assert all(0 <= bucket.hour <= 23 for bucket in snapshot.hourly_distribution)


class TestDailyAverages:
    def test_average_count_and_dominant_mood(self, make_record):
        records = [make_record("happy"), make_record("happy"), make_record("happy"), make_record("sad")]

        [day] = daily_averages(records)

        assert day.average == 3.5
        assert day.count == 4
        assert day.dominant_mood == "happy"

    def test_sorted_newest_date_first(self, make_record):
        records = [make_record("happy", days_ago=2), make_record("sad", days_ago=0), make_record("tired", days_ago=5)]

        dates = [day.date for day in daily_averages(records)]

        assert dates == sorted(dates, reverse=True)
        assert dates[0] == "2024-06-15"

    def test_shared_scores_are_not_merged(self, make_record):
        [day] = daily_averages([make_record("sad"), make_record("tired")])

        assert day.average == 2
        assert day.dominant_mood in {"sad", "tired"}

    def test_tie_goes_to_last_record_in_order(self, make_record, today):
        # newest first: neutral, sad, happy, happy, sad -> the last tied record is the 09:00 sad
        records = [
            make_record("sad", time="09:00"),
            make_record("happy", time="10:00"),
            make_record("happy", time="11:00"),
            make_record("sad", time="12:00"),
            make_record("neutral", time="13:00"),
        ]

        snapshot = compute_analytics(records, today=today)

        assert snapshot.daily_averages[0].dominant_mood == "sad"

    def test_tie_between_identical_timestamps_follows_input_order(self, make_record):
        happy = make_record("happy", time="10:00")
        sad = make_record("sad", time="10:00")

        assert daily_averages([happy, sad])[0].dominant_mood == "sad"
        assert daily_averages([sad, happy])[0].dominant_mood == "happy"

    def test_unknown_mood_scores_zero(self, make_record):
        [day] = daily_averages([make_record("happy"), make_record("ecstatic")])

        assert day.average == 2
        assert day.count == 2


class TestWeeklyAnalysis:
    def test_improving_week(self, make_record, today):
        current = [make_record("happy", days_ago=days) for days in range(0, 7)]
        previous = [make_record("sad", days_ago=days) for days in range(8, 15)]

        weekly = weekly_analysis(current + previous, today=today)

        assert weekly.trend == "improving"
        assert weekly.current_week_avg == 4
        assert weekly.previous_week_avg == 2
        assert weekly.total_entries == 7
        assert weekly.mood_counts == {"happy": 7}
        assert weekly.dominant_mood == "happy"

    def test_declining_week(self, make_record, today):
        records = [make_record("anxious", days_ago=1), make_record("very-happy", days_ago=10)]

        weekly = weekly_analysis(records, today=today)

        assert weekly.trend == "declining"
        assert weekly.current_week_avg == 1
        assert weekly.previous_week_avg == 5

    def test_equal_averages_are_stable(self, make_record, today):
        records = [make_record("sad", days_ago=1), make_record("tired", days_ago=9)]

        assert weekly_analysis(records, today=today).trend == "stable"

    def test_empty_previous_week_compares_against_zero(self, make_record, today):
        weekly = weekly_analysis([make_record("anxious", days_ago=2)], today=today)

        assert weekly.previous_week_avg == 0
        assert weekly.trend == "improving"

    def test_window_boundaries(self, make_record, today):
        records = [
            make_record("happy", days_ago=7),
            make_record("sad", days_ago=8),
            make_record("sad", days_ago=14),
            make_record("anxious", days_ago=15),
        ]

        weekly = weekly_analysis(records, today=today)

        assert weekly.total_entries == 1
        assert weekly.mood_counts == {"happy": 1}
        assert weekly.previous_week_avg == 2

    def test_dominant_mood_tie_goes_to_first_seen(self, make_record, today):
        records = [
            make_record("sad", days_ago=1),
            make_record("happy", days_ago=2),
            make_record("happy", days_ago=3),
            make_record("sad", days_ago=4),
        ]

        weekly = weekly_analysis(records, today=today)

        assert weekly.mood_counts == {"sad": 2, "happy": 2}
        assert weekly.dominant_mood == "sad"


class TestMoodDistribution:
    def test_catalog_order_and_zero_rows_dropped(self, make_record, today):
        records = [make_record("tired"), make_record("tired"), make_record("tired"), make_record("happy")]

        rows = mood_distribution(records, today=today)

        assert [row.label for row in rows] == ["Happy", "Tired"]
        assert [row.value for row in rows] == [1, 3]

    def test_rows_serialize_with_display_metadata(self, make_record, today):
        [row] = mood_distribution([make_record("very-happy")], today=today)

        assert row.model_dump(by_alias=True) == {"name": "Very Happy", "value": 1, "color": "#ec4899", "emoji": "😍"}

    def test_thirty_day_window(self, make_record, today):
        records = [make_record("happy", days_ago=30), make_record("sad", days_ago=31)]

        rows = mood_distribution(records, today=today)

        assert [(row.label, row.value) for row in rows] == [("Happy", 1)]

    def test_unknown_moods_have_no_row(self, make_record, today):
        assert mood_distribution([make_record("ecstatic")], today=today) == []


class TestHourlyDistribution:
    def test_buckets_in_ascending_hour_order(self, make_record):
        records = [
            make_record("happy", time="21:05"),
            make_record("sad", time="07:59"),
            make_record("neutral", time="07:00"),
            make_record("very-happy", days_ago=40, time="00:10"),
        ]

        buckets = hourly_distribution(records)

        assert [bucket.hour for bucket in buckets] == [0, 7, 21]
        assert [bucket.time_label for bucket in buckets] == ["00:00", "07:00", "21:00"]
        assert buckets[1].count == 2
        assert buckets[1].avg_mood == 2.5

    def test_unknown_mood_counts_with_zero_score(self, make_record):
        [bucket] = hourly_distribution([make_record("happy", time="08:00"), make_record("ecstatic", time="08:30")])

        assert bucket.count == 2
        assert bucket.avg_mood == 2
