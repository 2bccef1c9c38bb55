"""
PropertySearchService - Busca de Imóveis
=========================================

Busca paginada com filtros compostos + consultas auxiliares para popular
filtros no frontend.

FLUXO DA BUSCA:
1. Normaliza parâmetros (paginação, ordenação, predicado)
2. Busca a página de imóveis (com dono e imobiliária)
3. Conta o total de resultados com o MESMO predicado
4. Devolve resultado + metadados de paginação + tempo de execução

As duas leituras (lista e contagem) não compartilham snapshot: com escritas
concorrentes, o total pode divergir da última página.

POLÍTICA DE ERROS:
- search(): qualquer erro do banco vira SearchFailure (sem retry, sem
  resultado parcial)
- get_available_property_types() / get_available_cities() / get_price_range():
  nunca lançam; registram o erro e devolvem valor padrão
"""

import logging
import math
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from imoveis.domain.entities import Property
from imoveis.infrastructure.repositories.interface import PropertyRepository
from imoveis.services.search_params import (
    NormalizedSearchParams,
    SearchConfig,
    SearchParams,
    SearchPredicate,
    normalize_property_type,
    normalize_search_params,
)
from imoveis.utils.errors import SearchFailure

logger = logging.getLogger(__name__)


@dataclass
class Pagination:
    page: int
    limit: int
    total: int
    pages: int


@dataclass
class SearchResult:
    """Resultado da busca com metadados."""

    properties: Sequence[Property]
    pagination: Pagination
    filters: Dict[str, Any] = field(default_factory=dict)
    execution_time_ms: int = 0


@dataclass
class PriceRange:
    min: float
    max: float


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class PropertySearchService:
    """Service de busca de imóveis."""

    def __init__(self, repository: PropertyRepository, config: Optional[SearchConfig] = None):
        self.repository = repository
        self.config = config or SearchConfig()

    # =========================================================================
    # BUSCA PRINCIPAL
    # =========================================================================

    async def search(self, params: SearchParams) -> SearchResult:
        """
        Executa a busca paginada.

        Args:
            params: Parâmetros crus vindos da rota

        Returns:
            SearchResult com imóveis, paginação, filtros aplicados e tempo

        Raises:
            SearchFailure: se qualquer leitura no banco falhar
        """
        start = time.perf_counter()
        normalized = normalize_search_params(params, self.config)

        logger.info(
            "Iniciando busca de imóveis",
            extra={"context": {
                "filters": normalized.predicate.applied_filters(),
                "page": normalized.page,
                "limit": normalized.limit,
                "sort_by": normalized.sort_by,
                "sort_order": normalized.sort_order,
            }},
        )
        if params.type:
            logger.debug(f"Filtro de tipo aplicado: {params.type} -> {normalized.predicate.property_type}")
        for key, value in normalized.predicate.applied_filters().items():
            logger.debug(f"Filtro aplicado: {key}={value}")

        try:
            properties = await self.repository.find(
                normalized.predicate,
                skip=normalized.skip,
                take=normalized.limit,
                sort_by=normalized.sort_by,
                sort_order=normalized.sort_order,
            )
            total = await self.repository.count(normalized.predicate)
        except Exception as e:
            elapsed = _elapsed_ms(start)
            logger.error(
                f"Erro na busca de imóveis: {e}",
                exc_info=True,
                extra={"context": {
                    "error": str(e),
                    "params": asdict(params),
                    "normalized_params": normalized.echo(),
                    "execution_time_ms": elapsed,
                }},
            )
            raise SearchFailure(str(e)) from e

        return self._build_result(normalized, properties, total, start)

    def _build_result(
        self,
        normalized: NormalizedSearchParams,
        properties: Sequence[Property],
        total: int,
        start: float,
    ) -> SearchResult:
        pages = math.ceil(total / normalized.limit)
        elapsed = _elapsed_ms(start)

        logger.info(
            f"Busca concluída: {len(properties)} de {total} imóveis em {elapsed}ms",
            extra={"context": {
                "found": len(properties),
                "total": total,
                "page": normalized.page,
                "pages": pages,
                "execution_time_ms": elapsed,
            }},
        )

        return SearchResult(
            properties=properties,
            pagination=Pagination(
                page=normalized.page,
                limit=normalized.limit,
                total=total,
                pages=pages,
            ),
            filters=normalized.echo(),
            execution_time_ms=elapsed,
        )

    # =========================================================================
    # CONSULTAS AUXILIARES (best-effort, nunca lançam)
    # =========================================================================

    def _available(self, property_type: Optional[str] = None) -> SearchPredicate:
        return SearchPredicate(status=self.config.default_status, property_type=property_type)

    async def get_available_property_types(self) -> List[str]:
        """Tipos distintos entre os imóveis disponíveis (para dropdowns)."""
        try:
            return await self.repository.find_distinct(self._available(), "property_type")
        except Exception as e:
            logger.error(f"Erro ao buscar tipos de imóveis: {e}")
            return []

    async def get_available_cities(self) -> List[str]:
        """Cidades distintas com imóveis disponíveis, em ordem alfabética."""
        try:
            cities = await self.repository.find_distinct(self._available(), "city")
        except Exception as e:
            logger.error(f"Erro ao buscar cidades: {e}")
            return []
        return sorted(set(cities))

    async def get_price_range(self, property_type: Optional[str] = None) -> PriceRange:
        """
        Menor e maior preço entre imóveis disponíveis, opcionalmente por tipo.

        Sem dados (ou com erro) devolve o fallback {min: 0, max: 1000000}:
        quem chama deve tratar isso como "sem dados", não como faixa real.
        """
        fallback_min, fallback_max = self.config.price_range_fallback

        mapped = None
        if property_type:
            mapped = normalize_property_type(property_type, self.config.type_synonyms)

        try:
            low, high = await self.repository.price_range(self._available(mapped))
        except Exception as e:
            logger.error(f"Erro ao buscar faixa de preços: {e}")
            return PriceRange(min=fallback_min, max=fallback_max)

        return PriceRange(
            min=low if low is not None else fallback_min,
            max=high if high is not None else fallback_max,
        )
