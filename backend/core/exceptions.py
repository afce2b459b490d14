"""Error types raised by route handlers and the JSON envelopes they render to."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

DATABASE_UNAVAILABLE_MESSAGE = 'Database unavailable. Verify DATABASE_URL and database credentials.'


class ApiError(Exception):
    """Base class for errors that map to a JSON error response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'internal server error'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {'error': True, 'message': self.message}


class UnauthorizedError(ApiError):
    """Raised when a bearer token is missing, malformed, expired or forged."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = 'unauthorized access'


class ForbiddenError(ApiError):
    """Raised when the caller is authenticated but lacks the required role."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = 'forbidden message'


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'not found'


class InsertFailedError(ApiError):
    """Raised when a new document could not be written.

    Web clients branch on ``status: false`` rather than on the error flag, so
    this envelope differs from the others.
    """

    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'can not insert try again leter'

    def to_payload(self) -> dict:
        return {'message': self.message, 'status': False}


class PaymentGatewayError(ApiError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = 'payment gateway error'


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception('Database error while handling %s %s', request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={'error': True, 'message': DATABASE_UNAVAILABLE_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
