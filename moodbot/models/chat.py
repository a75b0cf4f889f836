from __future__ import annotations

import uuid

import arrow
from pydantic import BaseModel, ConfigDict, Field


class ChatEntry(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: str = Field(..., alias="userId")
    user_message: str = Field(..., alias="userMessage")
    ai_response: str = Field(..., alias="aiResponse")
    mood: str | None = None
    timestamp: str = Field(default_factory=lambda: arrow.utcnow().isoformat())

    model_config = ConfigDict(populate_by_name=True)
