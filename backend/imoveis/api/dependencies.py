"""
DEPENDENCIES (Dependências)
============================

Funções que são injetadas nas rotas.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from imoveis.config import get_settings
from imoveis.infrastructure.database import get_db
from imoveis.infrastructure.repositories import SqlAlchemyPropertyRepository
from imoveis.services.property_search import PropertySearchService
from imoveis.services.search_params import SearchConfig


@lru_cache
def get_search_config() -> SearchConfig:
    """Configuração da busca, montada uma única vez a partir das settings."""
    return SearchConfig.from_settings(get_settings())


async def get_search_service(
    db: AsyncSession = Depends(get_db),
    config: SearchConfig = Depends(get_search_config),
) -> PropertySearchService:
    """
    Serviço de busca ligado à sessão da requisição.

    Uso nas rotas:
        @router.get("/")
        async def rota(service: PropertySearchService = Depends(get_search_service)):
            ...
    """
    return PropertySearchService(SqlAlchemyPropertyRepository(db), config)
