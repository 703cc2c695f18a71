from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete
from typing import List
import logging

from app.exceptions import ProductNotFoundError
from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse

logger = logging.getLogger(__name__)

# Range of the 32-bit INTEGER primary key column
MIN_ID = -(2 ** 31)
MAX_ID = 2 ** 31 - 1


class ProductService:
    """
    Service class for Product CRUD operations.

    This is the only layer that reads or writes the products table.
    Every method hands back plain ProductResponse values, and every
    mutation is an explicit statement instead of tracked ORM attribute
    changes:
    - Listing and reading products
    - Creating products
    - Full updates and availability toggles
    - Deleting products
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[ProductResponse]:
        """Get every product, newest id first."""
        products = self.db.scalars(select(Product).order_by(Product.id.desc())).all()
        return [ProductResponse.model_validate(p) for p in products]

    def get_by_id(self, product_id: int) -> ProductResponse:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If no row has this id
        """
        self._check_id_range(product_id)
        product = self.db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductResponse.model_validate(product)

    def create(self, product_data: ProductCreate) -> ProductResponse:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product including the id assigned by the store
        """
        product = Product(**product_data.model_dump())
        self.db.add(product)
        self._commit()
        self.db.refresh(product)

        logger.info(f"Product #{product.id} created")
        return ProductResponse.model_validate(product)

    def update(self, product_id: int, product_data: ProductUpdate) -> ProductResponse:
        """
        Overwrite name, price and availability of an existing product.

        Args:
            product_id: ID of product to update
            product_data: Full set of new field values

        Returns:
            Updated product

        Raises:
            ProductNotFoundError: If no row has this id
        """
        self._check_id_range(product_id)
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(**product_data.model_dump())
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise ProductNotFoundError(product_id)

        self._commit()
        logger.info(f"Product #{product_id} updated")
        return self.get_by_id(product_id)

    def toggle_availability(self, product_id: int) -> ProductResponse:
        """
        Flip the availability flag of a product.

        Reads the current value, builds the negated one and writes it back
        through update().
        """
        current = self.get_by_id(product_id)
        return self.update(
            product_id,
            ProductUpdate(
                name=current.name,
                price=current.price,
                availability=not current.availability,
            ),
        )

    def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            ProductNotFoundError: If no row has this id
        """
        self._check_id_range(product_id)
        result = self.db.execute(delete(Product).where(Product.id == product_id))
        if result.rowcount == 0:
            self.db.rollback()
            raise ProductNotFoundError(product_id)

        self._commit()
        logger.info(f"Product #{product_id} deleted")

    @staticmethod
    def _check_id_range(product_id: int) -> None:
        """No row can hold an id the key column cannot represent."""
        if not MIN_ID <= product_id <= MAX_ID:
            raise ProductNotFoundError(product_id)

    def _commit(self) -> None:
        """Commit the unit of work, rolling back if the store rejects it."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
