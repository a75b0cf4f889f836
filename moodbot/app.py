from __future__ import annotations

import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moodbot.utils.log import log

load_dotenv(verbose=True)

DEVELOPMENT = os.getenv("DEVELOPMENT", "True").lower() == "true"
VERSION_FILE = Path(__file__).resolve().parent / "version.txt"


@asynccontextmanager
async def lifespan(app: FastAPI):
    from moodbot.routes.utils import data_handler

    app.state.data_handler = data_handler
    log.info("MoodBot API %s starting", app.version)

    try:
        yield
    finally:
        await app.state.data_handler.close()
        log.info("MoodBot API stopped")


with open(VERSION_FILE, "r") as vf:
    version = vf.read().strip()

app = FastAPI(
    title="MoodBot API",
    description="Mood tracking with daily, weekly, monthly and hourly analytics and a supportive chat companion.",
    version=version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Moods",
            "description": "Record mood entries and browse a user's mood history.",
        },
        {
            "name": "Analytics",
            "description": "Daily averages, week-over-week trend, 30-day distribution and hourly activity derived from a user's moods.",  # noqa: E501
        },
        {
            "name": "Users",
            "description": "User initialization with sample mood history.",
        },
        {
            "name": "Chat",
            "description": "Keyword-aware supportive replies and per-user chat history.",
        },
        {
            "name": "System & Meta",
            "description": "Health check and the mood options catalog.",
        },
    ],
)

app.state.development = DEVELOPMENT

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Authorization", "Content-Type", "User-Agent"],
)

from . import middleware as middleware  # noqa: E402
from .routes import api_router as api_router  # noqa: E402
from .routes.error import http as http  # noqa: E402

app.include_router(api_router)
