"""Liveness and readiness probes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from aura.config import Config

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"], route_class=DishkaRoute)


@router.get("/healthz")
async def healthz(session: FromDishka[AsyncSession], config: FromDishka[Config]):
    """Report healthy only when the database answers."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check query failed")
        return JSONResponse(status_code=503, content={"status": "unhealthy"})
    return {"status": "healthy", "version": config.server.version}


@router.get("/readyz")
async def readyz() -> dict:
    return {"status": "ready"}
