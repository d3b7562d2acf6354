"""Exception-to-HTTP mapping shared by every router of the app.

Protean's default handlers are installed first; the mappings below then
take precedence for the errors this service raises itself.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from notifications.errors import NotificationFailedError
from ordering.catalog.port import CatalogUnavailableError

STATUS_CODES = {
    ValidationError: 400,
    ObjectNotFoundError: 404,
    InvalidOperationError: 409,
    NotificationFailedError: 502,
    CatalogUnavailableError: 503,
}


def error_content(exc: Exception) -> dict:
    """Field-keyed messages carried by ``exc``."""
    messages = getattr(exc, "messages", None)
    if messages is None and exc.args and isinstance(exc.args[0], dict):
        messages = exc.args[0]
    if isinstance(messages, dict):
        return messages
    return {"_entity": [str(messages or exc)]}


def _handler(status_code: int):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"error": error_content(exc)})

    return handle


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    for exc_class, status_code in STATUS_CODES.items():
        app.add_exception_handler(exc_class, _handler(status_code))
