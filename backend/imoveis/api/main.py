"""
IMÓVEIS API - Ponto de Entrada
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from imoveis.config import get_settings
from imoveis.infrastructure.database import init_db
from imoveis.infrastructure.logging_config import setup_logging
from imoveis.infrastructure.middleware.rate_limiter import limiter, rate_limit_exceeded_handler
from imoveis.utils.errors import SearchFailure

# Routers
from imoveis.api.routes import search_router, health_router

settings = get_settings()

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


# ============================================================
# LIFESPAN
# ============================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Iniciando {settings.app_name} v{settings.app_version} ({settings.environment})")

    if not settings.is_production:
        await init_db()
        logger.info("Tabelas criadas/verificadas")

    yield

    logger.info("Encerrando API...")


# ============================================================
# FASTAPI APP
# ============================================================
app = FastAPI(
    title=settings.app_name,
    description="Busca de imóveis para venda e locação",
    version=settings.app_version,
    lifespan=lifespan,
)

# ============================================================
# RATE LIMITING
# ============================================================
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# ============================================================
# CORS
# ============================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# ============================================================
# ERROS
# ============================================================
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        "Parâmetros de busca inválidos",
        extra={"context": {"errors": exc.errors(), "query": dict(request.query_params)}},
    )
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Parâmetros de busca inválidos",
            "details": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(SearchFailure)
async def search_failure_handler(request: Request, exc: SearchFailure):
    logger.error(
        "Erro no endpoint de busca",
        extra={"context": {"error": str(exc), "query": dict(request.query_params)}},
    )
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Erro interno ao processar busca",
            "message": str(exc),
        },
    )


# ============================================================
# ROTAS
# ============================================================
app.include_router(search_router, prefix="/api/search")
app.include_router(health_router)

# Alias em português para compatibilidade com o frontend
app.include_router(search_router, prefix="/buscar", include_in_schema=False)


@app.get("/")
async def root():
    return {"name": settings.app_name, "status": "running"}
