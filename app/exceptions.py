import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.schemas.product import FieldViolation

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Producto no encontrado"
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class ProductNotFoundError(Exception):
    """Exception raised when the requested product doesn't exist."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")


class RequestValidationFailed(Exception):
    """Exception raised when request data breaks one or more field rules."""

    def __init__(self, violations: list[FieldViolation]):
        self.violations = violations
        super().__init__(f"{len(violations)} validation error(s)")


def _violations_response(violations: list[FieldViolation]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(violations)},
    )


async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": NOT_FOUND_MESSAGE},
    )


async def validation_failed_handler(request: Request, exc: RequestValidationFailed):
    return _violations_response(exc.violations)


async def malformed_request_handler(request: Request, exc: RequestValidationError):
    """Answer framework-level rejections (e.g. broken JSON) like our own violations."""
    violations = []
    for error in exc.errors():
        loc = error.get("loc", ())
        violations.append(
            FieldViolation(
                value=error.get("input"),
                msg=error.get("msg", "Valor no válido"),
                path=".".join(str(part) for part in loc[1:]) or "body",
                location="params" if loc and loc[0] == "path" else "body",
            )
        )
    return _violations_response(violations)


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Unexpected store error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(RequestValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, malformed_request_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
