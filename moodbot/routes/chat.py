from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from moodbot.models import ChatEntry
from moodbot.utils import ContextualResponder

from .utils import DataHandler, get_data_handler, get_responder

router = APIRouter(tags=["Chat"])


class ChatRequest(BaseModel):
    user_id: str | None = Field(None, alias="userId", examples=["user-123"])
    message: str | None = Field(None, examples=["Work has been stressful"])
    mood: str | None = Field(None, examples=["anxious"])

    model_config = ConfigDict(populate_by_name=True)


@router.post("/chat")
async def chat(
    payload: ChatRequest,
    data_handler: DataHandler = Depends(get_data_handler),
    responder: ContextualResponder = Depends(get_responder),
):
    """
    Reply to a chat message and keep the exchange in the user's chat history.
    """
    if not payload.user_id or not payload.message:
        raise HTTPException(status_code=400, detail="User ID and message are required")

    response = responder.respond(payload.mood, payload.message)

    entry = ChatEntry(
        user_id=payload.user_id,
        user_message=payload.message,
        ai_response=response,
        mood=payload.mood or None,
    )
    await data_handler.save_chat_entry(entry)

    return {"success": True, "data": {"response": response}, "message": "Chat response generated"}


@router.get("/users/{user_id}/chat-history")
async def get_chat_history(
    user_id: str,
    limit: int | None = Query(None, ge=0),
    data_handler: DataHandler = Depends(get_data_handler),
):
    """
    Chat history for a user in the order it happened. ``limit`` keeps the last N exchanges.
    """
    history = await data_handler.get_chat_history(user_id)

    if limit:
        history = history[-limit:]

    return {"success": True, "data": [entry.model_dump(by_alias=True) for entry in history]}
