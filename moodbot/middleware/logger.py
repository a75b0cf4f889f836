from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TextIO

import colorama
from colorama import Back, Fore, Style
from fastapi import status
from starlette.types import ASGIApp, Message, Receive, Scope, Send

colorama.init(autoreset=True)

_STATUS_COLORS = {
    range(200, 300): Fore.BLACK + Back.GREEN,
    range(300, 400): Fore.BLACK + Back.YELLOW,
    range(400, 500): Fore.WHITE + Back.RED,
    range(500, 600): Fore.WHITE + Back.MAGENTA,
}

_METHOD_COLORS = {
    "GET": Fore.WHITE + Back.BLUE,
    "POST": Fore.WHITE + Back.GREEN,
    "OPTIONS": Fore.BLACK + Back.WHITE,
}

_DEFAULT_COLOR = Fore.BLACK + Back.WHITE


def format_duration(duration_ms: float) -> str:
    if duration_ms < 1:
        return f"{duration_ms * 1000:.0f}µs"
    if duration_ms < 1000:
        return f"{duration_ms:.1f}ms"
    return f"{duration_ms / 1000:.2f}s"


def status_color(status_code: int) -> str:
    for status_range, color in _STATUS_COLORS.items():
        if status_code in status_range:
            return color
    return _DEFAULT_COLOR


def client_ip(scope: Scope) -> str:
    headers = dict(scope.get("headers", []))

    forwarded_for = headers.get(b"x-forwarded-for")
    if forwarded_for:
        return forwarded_for.decode().split(",")[0].strip()

    client = scope.get("client")
    if client:
        return client[0]

    return "unknown"


@dataclass
class ConsoleLoggingMiddleware:
    """
    One colourised access line per HTTP request.

    Replaces uvicorn's own access log, which is disabled on construction.
    """

    app: ASGIApp
    output: TextIO = sys.stdout

    def __post_init__(self) -> None:
        uvicorn_access_logger = logging.getLogger("uvicorn.access")
        uvicorn_access_logger.disabled = True
        uvicorn_access_logger.propagate = False

    def _write(self, message: str) -> None:
        print(message, file=self.output, flush=True)

    def build_line(self, scope: Scope, status_code: int, duration_ms: float) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f")
        method = scope.get("method", "GET")

        path = scope.get("path", "/")
        query_string = scope.get("query_string", b"").decode()
        if query_string:
            path += f"?{query_string}"

        return (
            f"{timestamp} "
            f"{status_color(status_code)} {status_code} {Style.RESET_ALL} | "
            f"{format_duration(duration_ms):>8} | "
            f"{client_ip(scope):>15} | "
            f"{_METHOD_COLORS.get(method, _DEFAULT_COLOR)} {method:>4} {Style.RESET_ALL} "
            f'"{path}"'
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code

            if message["type"] == "http.response.start":
                status_code = message["status"]

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self._write(self.build_line(scope, status_code, duration_ms))
