from __future__ import annotations

import arrow
from fastapi import APIRouter, Depends, Request

from moodbot.utils import MoodCatalog

from .utils import get_catalog

router = APIRouter(tags=["System & Meta"])


@router.get("/health")
async def get_health(request: Request):
    """
    Health check endpoint for service monitoring.

    Confirms the API is up and reports the running version.
    """
    return {
        "success": True,
        "message": "MoodBot API is running!",
        "timestamp": arrow.utcnow().isoformat(),
        "version": request.app.version,
    }


@router.get("/mood-options")
async def get_mood_options(catalog: MoodCatalog = Depends(get_catalog)):
    """
    List every mood a user can record, with its score, emoji and chart colour.
    """
    return {"success": True, "data": [option.model_dump() for option in catalog]}
