"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답 {"error": message}로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from waste.application.common.exceptions import (
    ApplicationError,
    ClassificationError,
    MissingCoordinatesError,
    MissingImageError,
    PayloadTooLargeError,
    ServiceUnavailableError,
)
from waste.domain.exceptions import DomainError, InvalidCoordinateError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ServiceUnavailableError)
    async def service_unavailable_handler(request: Request, exc: ServiceUnavailableError):
        return _error(503, exc.message)

    @app.exception_handler(MissingImageError)
    async def missing_image_handler(request: Request, exc: MissingImageError):
        return _error(400, exc.message)

    @app.exception_handler(MissingCoordinatesError)
    async def missing_coordinates_handler(request: Request, exc: MissingCoordinatesError):
        return _error(400, exc.message)

    @app.exception_handler(InvalidCoordinateError)
    async def invalid_coordinate_handler(request: Request, exc: InvalidCoordinateError):
        return _error(400, exc.message)

    @app.exception_handler(PayloadTooLargeError)
    async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
        return _error(413, exc.message)

    @app.exception_handler(ClassificationError)
    async def classification_error_handler(request: Request, exc: ClassificationError):
        # 원인은 Command에서 이미 로깅됨
        return _error(500, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Request validation failed", extra={"path": request.url.path})
        return _error(400, "Invalid request")

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error(400, exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        logger.error("Unhandled application error", extra={"error_type": type(exc).__name__})
        return _error(500, "Internal server error")
