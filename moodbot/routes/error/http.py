from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from moodbot.app import app
from moodbot.utils.log import log

NOT_FOUND_MESSAGE = "API endpoint not found"
SERVER_ERROR_MESSAGE = "Something went wrong!"


def error_response(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error, **extra})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Router misses raise a bare 404 whose detail is the status phrase.
    if exc.status_code == HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return error_response(exc.status_code, NOT_FOUND_MESSAGE)

    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return error_response(HTTP_400_BAD_REQUEST, message)


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)

    if request.app.state.development:
        return error_response(HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE, details=str(exc))

    return error_response(HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)
