from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check whether the products store answers queries."
)
def readiness_check(request: Request):
    """Readiness check for the database connection."""
    checks = {"database": False}

    try:
        with request.app.state.database.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            checks["database"] = True
    except SQLAlchemyError as e:
        checks["database_error"] = str(e)

    return {
        "status": "ready" if checks["database"] else "not_ready",
        "checks": checks
    }
