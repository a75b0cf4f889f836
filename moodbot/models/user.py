from __future__ import annotations

import arrow
from pydantic import BaseModel, ConfigDict, Field

from .enums import Theme


class UserSettings(BaseModel):
    notifications: bool = True
    theme: Theme = Theme.LIGHT

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class User(BaseModel):
    id: str
    created_at: str = Field(default_factory=lambda: arrow.utcnow().isoformat(), alias="createdAt")
    settings: UserSettings = Field(default_factory=UserSettings)

    model_config = ConfigDict(populate_by_name=True)
