"""
HEALTH CHECK
============
Usado por monitoramento externo e pelo deploy.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select, func, text
from sqlalchemy.ext.asyncio import AsyncSession

from imoveis.config import get_settings
from imoveis.domain.entities import Property, PropertyStatus
from imoveis.infrastructure.database import get_db

settings = get_settings()
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Retorna 200 se tudo OK, 503 se o banco não responde.

    Verificações:
    - Database conectado
    - Quantidade de imóveis disponíveis
    """
    status = "healthy"
    checks = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as e:
        logger.error(f"Health check: banco indisponível: {e}")
        checks["database"] = f"error: {str(e)}"
        await db.rollback()
        status = "unhealthy"

    if status == "healthy":
        try:
            result = await db.execute(
                select(func.count(Property.id)).where(Property.status == PropertyStatus.AVAILABLE.value)
            )
            checks["available_properties"] = result.scalar() or 0
        except Exception as e:
            checks["available_properties"] = f"error: {str(e)}"

    checks["timestamp"] = datetime.now(timezone.utc).isoformat()

    return JSONResponse(
        status_code=200 if status == "healthy" else 503,
        content={
            "status": status,
            "environment": settings.environment,
            "checks": checks,
        },
    )
