from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from moodbot.models.enums import MoodType

__all__ = (
    "MoodOption",
    "MoodCatalog",
    "MOOD_OPTIONS",
    "DEFAULT_CATALOG",
)

MOOD_OPTIONS_PATH = Path(__file__).resolve().parent.parent / "static" / "mood_options.json"


class MoodOption(BaseModel):
    value: MoodType
    label: str
    emoji: str
    score: int = Field(..., ge=1, le=5)
    color: str

    model_config = ConfigDict(frozen=True, use_enum_values=True)


class MoodCatalog:
    """
    Immutable lookup from mood code to score and display metadata.

    Iteration follows the order the options were given in, which is also
    the order of the mood distribution rows.
    """

    def __init__(self, options: Iterable[MoodOption]) -> None:
        self._options: tuple[MoodOption, ...] = tuple(options)
        self._by_value = MappingProxyType({option.value: option for option in self._options})

    @classmethod
    def from_json(cls, path: Path | str) -> MoodCatalog:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return cls(MoodOption(**item) for item in data)

    def __iter__(self) -> Iterator[MoodOption]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, code: object) -> bool:
        return code in self._by_value

    @property
    def options(self) -> tuple[MoodOption, ...]:
        return self._options

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self._by_value)

    def get(self, code: str | None) -> MoodOption | None:
        if code is None:
            return None
        return self._by_value.get(code)

    def score(self, code: str | None) -> int:
        """Score of ``code``, or 0 when the code is not in the catalog."""
        option = self.get(code)
        return option.score if option else 0


DEFAULT_CATALOG = MoodCatalog.from_json(MOOD_OPTIONS_PATH)
MOOD_OPTIONS = DEFAULT_CATALOG.options
