import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
from catalog_api.core.config import settings
from catalog_api.db.session import get_db
from catalog_api.schemas.utils import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """Service status with a database ping; 503 when the database is unreachable."""
    health_status = {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "database": "connected",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Health check database ping failed: %s", e)
        health_status["status"] = "unhealthy"
        health_status["database"] = "unreachable"
        health_status["error"] = f"{type(e).__name__}: {str(e)[:100]}"
        return JSONResponse(status_code=503, content=health_status)
    return health_status
