from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, true
from sqlalchemy.sql import func

from app.database import Base


class Product(Base):
    """
    Product model representing items in the catalog.

    Attributes:
        id: Unique identifier assigned by the store
        name: Product name
        price: Product price (validated as positive before it gets here)
        availability: Whether the product can be sold
        created_at: Timestamp when product was created
        updated_at: Timestamp when product was last updated
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    price = Column(Float, nullable=False)
    availability = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', availability={self.availability})>"
