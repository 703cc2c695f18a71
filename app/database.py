import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import get_settings

logger = logging.getLogger(__name__)


# Base class for models
Base = declarative_base()


class Database:
    """
    Persistence handle owning the only engine to the products store.

    The handle is built explicitly and handed to the application factory,
    so tests can swap in an in-memory SQLite store.
    """

    def __init__(self, url: Optional[str] = None, **engine_kwargs):
        settings = get_settings()
        self.url = url or settings.DATABASE_URL
        engine_kwargs.setdefault("echo", settings.DATABASE_ECHO)
        engine_kwargs.setdefault("pool_pre_ping", True)
        self.engine: Engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def connect(self) -> bool:
        """
        Check the store connection and sync the schema.

        A single attempt is made. Connection errors are logged, not raised,
        and the caller decides what to do with a False result.
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            self.create_all()
        except SQLAlchemyError as e:
            logger.error(f"Hubo un error al conectar a la BD: {e}")
            return False

        logger.info("Conexión exitosa a la BD")
        return True

    def disconnect(self) -> None:
        """Release every pooled connection."""
        self.engine.dispose()

    def create_all(self) -> None:
        # Register models on the metadata before creating tables
        from app.models import product  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def reset(self) -> None:
        """Drop and recreate every table. All rows are lost."""
        from app.models import product  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency to get database session.
    Yields a session from the application's Database and closes it after use.
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
