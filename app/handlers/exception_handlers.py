from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.exceptions import BusinessValidationError, InvalidStateError, ResourceNotFoundError
from app.schemas.common import ApiResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, metadata=None) -> JSONResponse:
    body = ApiResponse.error(message, metadata).model_dump(by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def handle_business_validation(request: Request, exc: BusinessValidationError) -> JSONResponse:
    logger.warning(f"Business validation failed on {request.method} {request.url.path}: {exc.validation_errors}")
    return _error_response(400, str(exc), {"errors": exc.validation_errors})


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body')}: {err['msg']}"
        for err in exc.errors()
    ]
    logger.warning(f"Request validation failed on {request.method} {request.url.path}: {errors}")
    return _error_response(400, "Request validation failed", {"errors": errors})


async def handle_not_found(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    logger.warning(str(exc))
    return _error_response(
        404,
        str(exc),
        {
            "resourceName": exc.resource_name,
            "fieldName": exc.field_name,
            "fieldValue": exc.field_value,
        },
    )


async def handle_invalid_state(request: Request, exc: InvalidStateError) -> JSONResponse:
    logger.warning(f"Invalid state on {request.method} {request.url.path}: {exc}")
    return _error_response(
        409,
        str(exc),
        {"currentState": exc.current_state, "expectedState": exc.expected_state},
    )


async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"❌ Storage failure on {request.method} {request.url.path}: {str(exc)}")
    return _error_response(503, "Storage is temporarily unavailable")


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    return _error_response(500, "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BusinessValidationError, handle_business_validation)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(ResourceNotFoundError, handle_not_found)
    app.add_exception_handler(InvalidStateError, handle_invalid_state)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
    app.add_exception_handler(Exception, handle_unexpected)
