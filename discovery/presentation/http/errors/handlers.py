"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from discovery.application.common.exceptions.base import ApplicationError
from discovery.application.common.exceptions.validation import (
    BusinessDirectoryUnavailableError,
    DirectionsUnavailableError,
    SearchDispatchFailedError,
    SessionNotFoundError,
)
from discovery.domain.exceptions.base import DomainError
from discovery.domain.exceptions.business import BusinessNotFoundError


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(request: Request, exc: SessionNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "SESSION_NOT_FOUND"},
        )

    @app.exception_handler(BusinessNotFoundError)
    async def business_not_found_handler(request: Request, exc: BusinessNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "BUSINESS_NOT_FOUND"},
        )

    @app.exception_handler(DirectionsUnavailableError)
    async def directions_unavailable_handler(request: Request, exc: DirectionsUnavailableError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": "DIRECTIONS_UNAVAILABLE"},
        )

    @app.exception_handler(SearchDispatchFailedError)
    async def search_failed_handler(request: Request, exc: SearchDispatchFailedError):
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": "SEARCH_FAILED"},
        )

    @app.exception_handler(BusinessDirectoryUnavailableError)
    async def directory_unavailable_handler(
        request: Request, exc: BusinessDirectoryUnavailableError
    ):
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": "BUSINESS_DIRECTORY_UNAVAILABLE"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
