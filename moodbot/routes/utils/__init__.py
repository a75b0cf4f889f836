from __future__ import annotations

from moodbot.utils import DEFAULT_CATALOG, ContextualResponder, MoodCatalog

from .data_handler import (  # noqa: F401
    DataHandler,
    MemoryDataHandler,
    MongoDataHandler,
    create_data_handler,
    data_handler,
)

responder = ContextualResponder()


def get_data_handler() -> DataHandler:
    return data_handler


def get_catalog() -> MoodCatalog:
    return DEFAULT_CATALOG


def get_responder() -> ContextualResponder:
    return responder
