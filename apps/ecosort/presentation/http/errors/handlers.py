"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 본문: {"error": <message>, "details"?: <diagnostic>}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ecosort.application.common.exceptions import ApplicationError, InputValidationError
from ecosort.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


def _error_body(message: str, details: object = None) -> dict:
    body: dict = {"error": message}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InputValidationError)
    async def input_validation_handler(request: Request, exc: InputValidationError):
        return JSONResponse(status_code=400, content=_error_body(exc.message, exc.details))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=_error_body("Invalid request", exc.errors()),
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.warning(
            "Pipeline request failed",
            extra={
                "path": request.url.path,
                "error_type": type(exc).__name__,
                "failed_stage": exc.stage.value if exc.stage else None,
            },
        )
        return JSONResponse(status_code=500, content=exc.to_payload())

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(status_code=500, content=_error_body(exc.message, exc.details))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
