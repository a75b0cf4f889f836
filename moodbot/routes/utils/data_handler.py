from __future__ import annotations

import os

import arrow
from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from moodbot.models import ChatEntry, MoodRecord, User
from moodbot.utils.log import log

_ = load_dotenv(verbose=True)

MONGODB_URI = os.getenv("MONGODB_URI")
DATABASE_NAME = "MoodBot"


class DataHandler:
    """
    Storage for users, mood records and chat entries.

    ``get_moods_by_user`` returns records newest first; chat history is
    returned in the order it was written.
    """

    async def user_exists(self, user_id: str, /) -> bool:
        return await self.get_user(user_id) is not None

    async def get_user(self, user_id: str, /) -> User | None:
        raise NotImplementedError

    async def create_user(self, user: User, /) -> None:
        raise NotImplementedError

    async def save_mood(self, mood: MoodRecord, /) -> None:
        raise NotImplementedError

    async def save_moods(self, moods: list[MoodRecord], /) -> None:
        for mood in moods:
            await self.save_mood(mood)

    async def get_moods_by_user(self, user_id: str, /) -> list[MoodRecord]:
        raise NotImplementedError

    async def save_chat_entry(self, entry: ChatEntry, /) -> None:
        raise NotImplementedError

    async def get_chat_history(self, user_id: str, /) -> list[ChatEntry]:
        raise NotImplementedError

    async def close(self) -> None:
        return None


class MemoryDataHandler(DataHandler):
    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.moods: list[MoodRecord] = []
        self.chat_sessions: dict[str, list[ChatEntry]] = {}

    async def get_user(self, user_id: str, /) -> User | None:
        return self.users.get(user_id)

    async def create_user(self, user: User, /) -> None:
        self.users.setdefault(user.id, user)

    async def save_mood(self, mood: MoodRecord, /) -> None:
        self.moods.append(mood)

    async def save_moods(self, moods: list[MoodRecord], /) -> None:
        self.moods.extend(moods)

    async def get_moods_by_user(self, user_id: str, /) -> list[MoodRecord]:
        moods = [mood for mood in self.moods if mood.user_id == user_id]
        return sorted(moods, key=lambda mood: arrow.get(mood.timestamp), reverse=True)

    async def save_chat_entry(self, entry: ChatEntry, /) -> None:
        self.chat_sessions.setdefault(entry.user_id, []).append(entry)

    async def get_chat_history(self, user_id: str, /) -> list[ChatEntry]:
        return list(self.chat_sessions.get(user_id, []))


class MongoDataHandler(DataHandler):
    def __init__(self, database: AsyncIOMotorDatabase, *, client: AsyncIOMotorClient | None = None) -> None:
        self.mongo_client = client
        self.users_collection: AsyncIOMotorCollection = database["users"]
        self.moods_collection: AsyncIOMotorCollection = database["moods"]
        self.chat_collection: AsyncIOMotorCollection = database["chat_sessions"]

    @classmethod
    def from_uri(cls, uri: str, database_name: str = DATABASE_NAME) -> MongoDataHandler:
        client = AsyncIOMotorClient(uri)
        return cls(client[database_name], client=client)

    async def get_user(self, user_id: str, /) -> User | None:
        user = await self.users_collection.find_one({"id": user_id}, {"_id": 0})
        if user is None:
            return None
        return User.model_validate(user)

    async def create_user(self, user: User, /) -> None:
        if await self.user_exists(user.id):
            return
        await self.users_collection.insert_one(user.model_dump(mode="json"))

    async def save_mood(self, mood: MoodRecord, /) -> None:
        await self.moods_collection.insert_one(mood.model_dump())

    async def save_moods(self, moods: list[MoodRecord], /) -> None:
        if not moods:
            return
        await self.moods_collection.insert_many([mood.model_dump() for mood in moods])

    async def get_moods_by_user(self, user_id: str, /) -> list[MoodRecord]:
        moods = []
        async for mood in self.moods_collection.find({"user_id": user_id}, {"_id": 0}).sort("timestamp", -1):
            moods.append(MoodRecord.model_validate(mood))
        return moods

    async def save_chat_entry(self, entry: ChatEntry, /) -> None:
        await self.chat_collection.insert_one(entry.model_dump())

    async def get_chat_history(self, user_id: str, /) -> list[ChatEntry]:
        entries = []
        async for entry in self.chat_collection.find({"user_id": user_id}, {"_id": 0}).sort("timestamp", 1):
            entries.append(ChatEntry.model_validate(entry))
        return entries

    async def close(self) -> None:
        if self.mongo_client is not None:
            self.mongo_client.close()


def create_data_handler(uri: str | None = MONGODB_URI) -> DataHandler:
    if uri:
        log.info("Using MongoDB storage (database %s)", DATABASE_NAME)
        return MongoDataHandler.from_uri(uri)

    log.info("MONGODB_URI not set, using in-memory storage")
    return MemoryDataHandler()


data_handler = create_data_handler()
