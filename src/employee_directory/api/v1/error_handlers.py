# employee_directory/api/v1/error_handlers.py
"""
FastAPI exception handlers for failures that happen outside an action.

Action routes already answer with an ActionResponse and never raise. What is left:
  - RequestValidationError: malformed body / path parameter -> INVALID_INPUT (400)
  - Starlette HTTPException: unknown route, wrong method -> NOT_FOUND / METHOD_NOT_ALLOWED / HTTP_ERROR
  - AppError raised by a non-action path -> its own status

All of them render the same failure envelope as the actions:
    {"ok": false, "error": {"code": "...", "message": "..."}}
with the structured error's status as the HTTP status.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_directory.actions.handler import to_failure
from employee_directory.exceptions.base import AppError, ErrorCode, InvalidInputError
from employee_directory.exceptions.validation_classifier import extract_field_errors, summarize_field_errors

logger = logging.getLogger(__name__)

_HTTP_STATUS_TO_CODE = {
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
}


def _render(error: AppError) -> JSONResponse:
    failure = to_failure(error)
    return JSONResponse(status_code=error.status, content=failure.model_dump(mode="json"))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = extract_field_errors(exc.errors())
    logger.info(
        "RequestValidationError for %s %s",
        request.method,
        request.url.path,
        extra={"fields": [f["field"] for f in fields]},
    )
    return _render(InvalidInputError(summarize_field_errors(fields), meta={"errors": fields}))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_STATUS_TO_CODE.get(exc.status_code, ErrorCode.HTTP_ERROR)
    logger.info("HTTPException %s for %s %s", exc.status_code, request.method, request.url.path)
    response = _render(AppError(code, str(exc.detail), exc.status_code))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning("AppError for %s %s: %s", request.method, request.url.path, exc)
    return _render(exc)


# Call from the app factory
def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(AppError, app_error_handler)
