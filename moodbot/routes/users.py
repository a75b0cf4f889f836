from __future__ import annotations

from fastapi import APIRouter, Depends

from moodbot.models import User
from moodbot.utils import MoodCatalog, generate_sample_data
from moodbot.utils.log import log

from .utils import DataHandler, get_catalog, get_data_handler

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/{user_id}/initialize")
async def initialize_user(
    user_id: str,
    data_handler: DataHandler = Depends(get_data_handler),
    catalog: MoodCatalog = Depends(get_catalog),
):
    """
    Create the user on first call and seed a month of sample mood history.

    Calling it again for an existing user changes nothing.
    """
    user = await data_handler.get_user(user_id)
    if user is None:
        user = User(id=user_id)
        await data_handler.create_user(user)

        sample = generate_sample_data(user_id, catalog=catalog)
        await data_handler.save_moods(sample)
        log.info("Initialized user %s with %d sample moods", user_id, len(sample))

    return {
        "success": True,
        "data": {"user": user.model_dump(by_alias=True, mode="json")},
        "message": "User initialized successfully",
    }
