from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any

from app.database import get_db
from app.exceptions import RequestValidationFailed
from app.services.product_service import ProductService
from app.validators.product import validate_create, validate_id, validate_update
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductEnvelope,
    ProductListEnvelope,
    MessageEnvelope,
    ValidationErrorResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/products", tags=["Products"])

DELETED_MESSAGE = "Producto Eliminado"

BAD_REQUEST = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ValidationErrorResponse,
        "description": "Bad request - Invalid Id or invalid input data",
    }
}
NOT_FOUND = {
    status.HTTP_404_NOT_FOUND: {
        "model": ErrorResponse,
        "description": "Product not found",
    }
}


def _request_body(schema) -> dict:
    """OpenAPI requestBody entry documenting the given schema."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


def _raise_on_violations(violations) -> None:
    if violations:
        raise RequestValidationFailed(violations)


@router.get(
    "",
    response_model=ProductListEnvelope,
    summary="Get a list of products",
    description="Return every product, ordered by id descending."
)
def list_products(db: Session = Depends(get_db)):
    """Get all products."""
    service = ProductService(db)
    return {"data": service.list_all()}


@router.get(
    "/{id}",
    response_model=ProductEnvelope,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a product by id",
    description="Return a product based on its unique ID."
)
def get_product(id: str, db: Session = Depends(get_db)):
    product_id, violations = validate_id(id)
    _raise_on_violations(violations)

    service = ProductService(db)
    return {"data": service.get_by_id(product_id)}


@router.post(
    "",
    response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Creates a new product",
    description="Returns a new record in the database.",
    openapi_extra=_request_body(ProductCreate),
)
def create_product(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Create a new product.

    - **name**: Product name (required, not empty)
    - **price**: Product price, must be a number greater than zero (required)
    - **availability**: Defaults to true
    """
    product_data, violations = validate_create(payload)
    _raise_on_violations(violations)

    service = ProductService(db)
    return {"data": service.create(product_data)}


@router.put(
    "/{id}",
    response_model=ProductEnvelope,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Updates a product with user input",
    description="Overwrites name, price and availability. Returns the updated product.",
    openapi_extra=_request_body(ProductUpdate),
)
def update_product(id: str, payload: Any = Body(None), db: Session = Depends(get_db)):
    validated, violations = validate_update(id, payload)
    _raise_on_violations(violations)

    product_id, product_data = validated
    service = ProductService(db)
    return {"data": service.update(product_id, product_data)}


@router.patch(
    "/{id}",
    response_model=ProductEnvelope,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Updates product availability",
    description="Flips the availability flag and returns the updated product."
)
def toggle_availability(id: str, db: Session = Depends(get_db)):
    product_id, violations = validate_id(id)
    _raise_on_violations(violations)

    service = ProductService(db)
    return {"data": service.toggle_availability(product_id)}


@router.delete(
    "/{id}",
    response_model=MessageEnvelope,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Deletes a product by a given ID",
    description="Returns a confirmation message."
)
def delete_product(id: str, db: Session = Depends(get_db)):
    """Delete a product."""
    product_id, violations = validate_id(id)
    _raise_on_violations(violations)

    service = ProductService(db)
    service.delete(product_id)
    return {"data": DELETED_MESSAGE}
