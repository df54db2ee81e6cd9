"""FastAPI exception handlers that render storefront errors as JSON."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import InvalidRequestError, StorefrontError
from shared.logging import get_logger

logger = get_logger(__name__)


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]


async def handle_storefront_error(request: Request, exc: StorefrontError) -> JSONResponse:
    logger.warning(
        "request.rejected",
        error=exc.message,
        error_type=type(exc).__name__,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 Invalid Request."""
    error = InvalidRequestError(details=_validation_details(exc))
    return await handle_storefront_error(request, error)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, handle_storefront_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
