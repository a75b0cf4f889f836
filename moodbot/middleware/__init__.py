from __future__ import annotations

from time import perf_counter
from typing import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

from moodbot.app import app

from .logger import ConsoleLoggingMiddleware

__all__ = ["ConsoleLoggingMiddleware"]


@app.middleware("http")
async def add_process_time_header(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    start_time = perf_counter()
    response = await call_next(request)
    response.headers["X-Process-Time"] = str(perf_counter() - start_time)
    return response


app.add_middleware(ConsoleLoggingMiddleware)
