from __future__ import annotations

import random
from datetime import date

import arrow

from moodbot.models.mood import MoodRecord

from .catalog import DEFAULT_CATALOG, MoodCatalog

__all__ = ("generate_sample_data",)

SAMPLE_DAYS = 30
MAX_ENTRIES_PER_DAY = 3
FIRST_HOUR = 8
LAST_HOUR = 19


def generate_sample_data(
    user_id: str,
    *,
    catalog: MoodCatalog = DEFAULT_CATALOG,
    today: date | None = None,
    rng: random.Random | None = None,
) -> list[MoodRecord]:
    """
    Random mood history covering today and the 30 days before it, oldest first.

    Each day gets one to three entries between 08:00 and 19:59 UTC; only the
    first entry of a day carries a note.
    """
    rng = rng or random.Random()
    start = arrow.get(today or arrow.utcnow().date())
    codes = catalog.codes
    created_at = arrow.utcnow().isoformat()

    records: list[MoodRecord] = []
    for offset in range(SAMPLE_DAYS, -1, -1):
        day = start.shift(days=-offset)

        for index in range(rng.randint(1, MAX_ENTRIES_PER_DAY)):
            at = day.replace(hour=rng.randint(FIRST_HOUR, LAST_HOUR), minute=rng.randint(0, 59))

            records.append(
                MoodRecord(
                    user_id=user_id,
                    mood=rng.choice(codes),
                    note=f"Sample note for {day.format('ddd MMM DD YYYY')}" if index == 0 else "",
                    date=at.format("YYYY-MM-DD"),
                    time=at.format("HH:mm"),
                    timestamp=at.isoformat(),
                    created_at=created_at,
                )
            )

    return records
