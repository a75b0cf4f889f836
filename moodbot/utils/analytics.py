from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date
from typing import Iterable, Literal, Sequence

import arrow
from pydantic import BaseModel, ConfigDict, Field

from moodbot.models.mood import MoodRecord

from .catalog import DEFAULT_CATALOG, MoodCatalog

__all__ = (
    "DailyAverage",
    "WeeklyAnalysis",
    "MoodDistributionItem",
    "HourlyBucket",
    "AnalyticsSnapshot",
    "compute_analytics",
    "daily_averages",
    "weekly_analysis",
    "mood_distribution",
    "hourly_distribution",
)

WEEK_DAYS = 7
DISTRIBUTION_DAYS = 30
HOURS_IN_DAY = 24

Trend = Literal["improving", "declining", "stable"]


class DailyAverage(BaseModel):
    date: str
    average: float
    count: int
    dominant_mood: str = Field(..., alias="dominantMood")

    model_config = ConfigDict(populate_by_name=True)


class WeeklyAnalysis(BaseModel):
    current_week_avg: float = Field(..., alias="currentWeekAvg")
    previous_week_avg: float = Field(..., alias="previousWeekAvg")
    trend: Trend
    dominant_mood: str | None = Field(None, alias="dominantMood")
    total_entries: int = Field(..., alias="totalEntries")
    mood_counts: dict[str, int] = Field(default_factory=dict, alias="moodCounts")

    model_config = ConfigDict(populate_by_name=True)


class MoodDistributionItem(BaseModel):
    label: str = Field(..., alias="name")
    value: int
    color: str
    emoji: str

    model_config = ConfigDict(populate_by_name=True)


class HourlyBucket(BaseModel):
    hour: int = Field(..., ge=0, lt=HOURS_IN_DAY)
    count: int
    avg_mood: float = Field(..., alias="avgMood")
    time_label: str = Field(..., alias="timeLabel")

    model_config = ConfigDict(populate_by_name=True)


class AnalyticsSnapshot(BaseModel):
    daily_averages: list[DailyAverage] = Field(default_factory=list, alias="dailyAverages")
    weekly_analysis: WeeklyAnalysis | None = Field(None, alias="weeklyAnalysis")
    mood_distribution: list[MoodDistributionItem] = Field(default_factory=list, alias="moodDistribution")
    hourly_distribution: list[HourlyBucket] = Field(default_factory=list, alias="hourlyDistribution")

    model_config = ConfigDict(populate_by_name=True)


def _mean(scores: Sequence[int]) -> float:
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def _days_before(today: date, days: int) -> str:
    return arrow.get(today).shift(days=-days).format("YYYY-MM-DD")


def _utc_today() -> date:
    return arrow.utcnow().date()


def _newest_first(records: Iterable[MoodRecord]) -> list[MoodRecord]:
    # sorted() is stable with reverse=True, records sharing a timestamp keep input order
    return sorted(records, key=lambda record: arrow.get(record.timestamp), reverse=True)


def _last_most_frequent(moods: Sequence[str]) -> str:
    counts = Counter(moods)
    return sorted(moods, key=counts.__getitem__)[-1]


def daily_averages(records: Sequence[MoodRecord], catalog: MoodCatalog = DEFAULT_CATALOG) -> list[DailyAverage]:
    """
    Per-date mean score, record count and dominant mood, newest date first.

    On a frequency tie the dominant mood is the tied code held by the last
    record of the day in ``records`` order.
    """
    days: defaultdict[str, list[MoodRecord]] = defaultdict(list)
    for record in records:
        days[record.date].append(record)

    averages = [
        DailyAverage(
            date=day,
            average=_mean([catalog.score(record.mood) for record in entries]),
            count=len(entries),
            dominant_mood=_last_most_frequent([record.mood for record in entries]),
        )
        for day, entries in days.items()
    ]
    return sorted(averages, key=lambda item: item.date, reverse=True)


def weekly_analysis(records: Sequence[MoodRecord], catalog: MoodCatalog = DEFAULT_CATALOG, *, today: date | None = None) -> WeeklyAnalysis:
    """
    Compare the trailing week against the week before it.

    The current week holds records dated on or after ``today - 7 days``; the
    previous week holds those from ``today - 14 days`` up to, but excluding,
    that boundary. The dominant mood of the current week is the most counted
    code, ties going to the code seen first while scanning ``records``.
    """
    today = today or _utc_today()
    week_start = _days_before(today, WEEK_DAYS)
    previous_start = _days_before(today, 2 * WEEK_DAYS)

    current_week = [record for record in records if record.date >= week_start]
    previous_week = [record for record in records if previous_start <= record.date < week_start]

    current_avg = _mean([catalog.score(record.mood) for record in current_week])
    previous_avg = _mean([catalog.score(record.mood) for record in previous_week])

    trend: Trend = "stable"
    if current_avg > previous_avg:
        trend = "improving"
    elif current_avg < previous_avg:
        trend = "declining"

    mood_counts: dict[str, int] = {}
    for record in current_week:
        mood_counts[record.mood] = mood_counts.get(record.mood, 0) + 1

    dominant_mood = max(mood_counts, key=mood_counts.__getitem__) if mood_counts else None

    return WeeklyAnalysis(
        current_week_avg=current_avg,
        previous_week_avg=previous_avg,
        trend=trend,
        dominant_mood=dominant_mood,
        total_entries=len(current_week),
        mood_counts=mood_counts,
    )


def mood_distribution(records: Sequence[MoodRecord], catalog: MoodCatalog = DEFAULT_CATALOG, *, today: date | None = None) -> list[MoodDistributionItem]:
    """Counts per catalog mood over the trailing 30 days, in catalog order, zero rows dropped."""
    today = today or _utc_today()
    cutoff = _days_before(today, DISTRIBUTION_DAYS)

    counts = Counter(record.mood for record in records if record.date >= cutoff)

    return [
        MoodDistributionItem(label=option.label, value=counts[option.value], color=option.color, emoji=option.emoji)
        for option in catalog
        if counts[option.value] > 0
    ]


def hourly_distribution(records: Sequence[MoodRecord], catalog: MoodCatalog = DEFAULT_CATALOG) -> list[HourlyBucket]:
    counts = [0] * HOURS_IN_DAY
    totals = [0] * HOURS_IN_DAY

    for record in records:
        hour = record.hour
        counts[hour] += 1
        totals[hour] += catalog.score(record.mood)

    return [
        HourlyBucket(
            hour=hour,
            count=counts[hour],
            avg_mood=totals[hour] / counts[hour],
            time_label=f"{hour:02d}:00",
        )
        for hour in range(HOURS_IN_DAY)
        if counts[hour] > 0
    ]


def compute_analytics(
    records: Iterable[MoodRecord],
    catalog: MoodCatalog = DEFAULT_CATALOG,
    *,
    today: date | None = None,
) -> AnalyticsSnapshot:
    """
    Build every analytics view for one user's records.

    Records are ordered newest first before any view is computed, so the
    result does not depend on the order the storage layer returned them in
    (except between records sharing a timestamp). ``today`` is a UTC
    calendar date and defaults to the current one.
    """
    ordered = _newest_first(records)
    if not ordered:
        return AnalyticsSnapshot()

    today = today or _utc_today()

    return AnalyticsSnapshot(
        daily_averages=daily_averages(ordered, catalog),
        weekly_analysis=weekly_analysis(ordered, catalog, today=today),
        mood_distribution=mood_distribution(ordered, catalog, today=today),
        hourly_distribution=hourly_distribution(ordered, catalog),
    )
