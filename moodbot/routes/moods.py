from __future__ import annotations

import arrow
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from moodbot.models import MoodRecord
from moodbot.utils import ContextualResponder, MoodCatalog, compute_analytics
from moodbot.utils.log import log

from .utils import DataHandler, get_catalog, get_data_handler, get_responder

router = APIRouter()


class MoodCreateRequest(BaseModel):
    """
    Payload for recording a mood. ``userId`` and ``mood`` are checked in the
    handler so that a missing field gets the API's own error message.
    """

    user_id: str | None = Field(None, alias="userId", examples=["user-123"])
    mood: str | None = Field(None, examples=["happy"])
    note: str | None = Field(None, examples=["Had a great walk"])

    model_config = ConfigDict(populate_by_name=True)


@router.post("/moods", status_code=201, tags=["Moods"])
async def create_mood(
    payload: MoodCreateRequest,
    data_handler: DataHandler = Depends(get_data_handler),
    catalog: MoodCatalog = Depends(get_catalog),
    responder: ContextualResponder = Depends(get_responder),
):
    """
    Record a mood for a user and reply with an encouraging message for that mood.
    """
    if not payload.user_id or not payload.mood:
        raise HTTPException(status_code=400, detail="User ID and mood are required")

    if payload.mood not in catalog:
        raise HTTPException(status_code=400, detail="Invalid mood value")

    mood = MoodRecord.create(payload.user_id, payload.mood, payload.note)
    await data_handler.save_mood(mood)
    log.info("Saved mood %s for user %s", mood.mood, mood.user_id)

    return {
        "success": True,
        "data": {"mood": mood.model_dump(by_alias=True), "aiResponse": responder.respond(mood.mood)},
        "message": "Mood saved successfully",
    }


@router.get("/users/{user_id}/moods", tags=["Moods"])
async def get_user_moods(
    user_id: str,
    limit: int | None = Query(None, ge=0),
    days: int | None = Query(None, ge=0),
    start_date: str | None = Query(None, alias="startDate", examples=["2024-01-01"]),
    end_date: str | None = Query(None, alias="endDate", examples=["2024-01-31"]),
    data_handler: DataHandler = Depends(get_data_handler),
):
    """
    Mood history for a user, newest first.

    - **days**: keep entries dated within the last N days
    - **startDate** / **endDate**: inclusive ``YYYY-MM-DD`` bounds
    - **limit**: keep only the N most recent entries
    """
    moods = await data_handler.get_moods_by_user(user_id)

    if days is not None:
        cutoff = arrow.utcnow().shift(days=-days).format("YYYY-MM-DD")
        moods = [mood for mood in moods if mood.date >= cutoff]

    if start_date:
        moods = [mood for mood in moods if mood.date >= start_date]

    if end_date:
        moods = [mood for mood in moods if mood.date <= end_date]

    if limit is not None:
        moods = moods[:limit]

    return {"success": True, "data": [mood.model_dump(by_alias=True) for mood in moods], "count": len(moods)}


@router.get("/users/{user_id}/analytics", tags=["Analytics"])
async def get_user_analytics(
    user_id: str,
    data_handler: DataHandler = Depends(get_data_handler),
    catalog: MoodCatalog = Depends(get_catalog),
):
    """
    Daily averages, weekly trend, 30-day mood distribution and hourly activity
    for a user. Every view is empty (weekly analysis ``null``) for a user with
    no moods.
    """
    moods = await data_handler.get_moods_by_user(user_id)
    snapshot = compute_analytics(moods, catalog)
    return {"success": True, "data": snapshot.model_dump(by_alias=True)}
