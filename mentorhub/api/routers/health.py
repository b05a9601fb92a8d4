"""
Liveness and database readiness probes.

Routes: GET /health, GET /health/db

Dependencies: mentorhub.boundary
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.boundary.db import get_async_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


class ProbeResult(BaseModel):
    status: str
    message: str


@router.get("", response_model=ProbeResult)
async def liveness() -> ProbeResult:
    return ProbeResult(status="healthy", message="Server Healthy")


@router.get("/db", response_model=ProbeResult)
async def database_readiness(db: AsyncSession = Depends(get_async_db)):
    """503 when a trivial query cannot reach the database."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database probe failed")
        unhealthy = ProbeResult(status="unhealthy", message="Database unreachable")
        return JSONResponse(status_code=503, content=unhealthy.model_dump())
    return ProbeResult(status="healthy", message="Database connection OK")
