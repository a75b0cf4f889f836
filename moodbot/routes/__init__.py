from fastapi import APIRouter

from .chat import router as chat_router
from .meta import router as meta_router
from .moods import router as moods_router
from .users import router as users_router

api_router = APIRouter(prefix="/api")

api_router.include_router(meta_router)
api_router.include_router(users_router)
api_router.include_router(moods_router)
api_router.include_router(chat_router)
