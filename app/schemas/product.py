from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Literal


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    name: str = Field(..., min_length=1, description="Product name", examples=["Monitor curvo de 49 pulgadas"])
    price: float = Field(..., gt=0, description="Product price (must be positive)", examples=[300])


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    availability: bool = Field(default=True, description="Product availability")


class ProductUpdate(ProductBase):
    """Schema for a full product update. Every field is overwritten."""
    availability: bool = Field(..., description="Product availability", examples=[True])


class ProductResponse(ProductBase):
    """Schema for product response. Store timestamps are left out."""
    id: int = Field(..., description="The Product ID", examples=[1])
    availability: bool = Field(..., description="The Product Availability", examples=[True])

    model_config = ConfigDict(from_attributes=True)


class ProductEnvelope(BaseModel):
    """Single product wrapped in the data envelope."""
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    """Product list wrapped in the data envelope."""
    data: list[ProductResponse]


class MessageEnvelope(BaseModel):
    """Confirmation message wrapped in the data envelope."""
    data: str = Field(..., examples=["Producto Eliminado"])


class FieldViolation(BaseModel):
    """A single field-level validation failure."""
    type: Literal["field"] = "field"
    value: Any = None
    msg: str
    path: str
    location: Literal["params", "body"]


class ValidationErrorResponse(BaseModel):
    """Body returned with 400 when request data fails validation."""
    errors: list[FieldViolation]


class ErrorResponse(BaseModel):
    """Body returned for not-found and internal errors."""
    error: str = Field(..., examples=["Producto no encontrado"])
