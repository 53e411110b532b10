# backend/routes/health.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from database import get_db, check_db_connection

router = APIRouter(prefix="/api/health", tags=["Health"])


# Liveness: answers as long as the process is up
@router.get("")
def health_check():
    return {"status": "ok", "message": "Backend is running"}


# Readiness: also requires the database to answer
@router.get("/ready")
def readiness_check(db: Session = Depends(get_db)):
    if not check_db_connection(db.get_bind()):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready"}
