from __future__ import annotations

import uuid

import arrow
from pydantic import BaseModel, ConfigDict, Field


class MoodRecord(BaseModel):
    """
    A single timestamped mood observation.

    ``date`` and ``time`` are the UTC calendar date and wall-clock time of
    ``timestamp``. Records are written once and never mutated.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: str = Field(..., alias="userId")
    mood: str
    note: str = ""
    date: str = Field(..., description="UTC calendar date", examples=["2024-01-15"])
    time: str = Field(..., description="UTC wall-clock time", examples=["14:30"])
    timestamp: str = Field(..., examples=["2024-01-15T14:30:00+00:00"])
    created_at: str = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def create(cls, user_id: str, mood: str, note: str | None = None, *, at: arrow.Arrow | None = None) -> MoodRecord:
        now = arrow.utcnow()
        at = (at or now).to("UTC")

        return cls(
            user_id=user_id,
            mood=mood,
            note=note or "",
            date=at.format("YYYY-MM-DD"),
            time=at.format("HH:mm"),
            timestamp=at.isoformat(),
            created_at=now.isoformat(),
        )

    @property
    def hour(self) -> int:
        return int(self.time.split(":")[0])
