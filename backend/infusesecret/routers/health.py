from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session, text

from infusesecret.config import get_settings
from infusesecret.db import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(session: Session = Depends(get_session)):
    db_status = "ok"
    try:
        session.exec(text("SELECT 1"))
    except Exception as exc:
        logger.warning("Health check could not reach the database", exc_info=True)
        db_status = f"error: {exc}"

    return {
        "status": "ok",
        "message": f"{get_settings().app_name} API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {"database": db_status},
    }


@router.get("/health/ready")
def readiness(session: Session = Depends(get_session)):
    try:
        session.exec(text("SELECT 1"))
    except Exception as exc:
        return JSONResponse(
            status_code=503,
            content={"status": "not ready", "error": str(exc)},
        )

    return {"status": "ready"}
