"""
API Routes: Busca de Imóveis
=============================

GET /api/search              - busca paginada com filtros
GET /api/search/types        - tipos disponíveis (dropdown)
GET /api/search/price-range  - menor/maior preço (slider), opcionalmente por tipo
GET /api/search/cities       - cidades disponíveis

Também montado em /buscar (alias em português).

Exemplo:
    GET /api/search?type=Casa&priceMax=500000&city=Goiânia&bedroomsMin=3

Os parâmetros chegam em camelCase, como os clientes já enviam.
Amenidades vêm separadas por vírgula: amenities=Piscina,Churrasqueira
"""
import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from imoveis.api.dependencies import get_search_service
from imoveis.infrastructure.middleware.rate_limiter import limiter, search_rate_limit
from imoveis.api.schemas.search import (
    CitiesData,
    CitiesResponse,
    PaginationSchema,
    PriceRangeData,
    PriceRangeResponse,
    PropertySearchItem,
    SearchData,
    SearchResponse,
    TypesData,
    TypesResponse,
)
from imoveis.services.property_search import PropertySearchService
from imoveis.services.search_params import SearchParams

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


# =============================================================================
# BUSCA PRINCIPAL
# =============================================================================

@router.get("", response_model=SearchResponse)
@limiter.shared_limit(search_rate_limit, scope="search")
async def search_properties(
    request: Request,
    response: Response,
    type: Optional[str] = Query(None, description="Tipo: HOUSE, APARTMENT, Casa, Apartamento..."),
    price_min: Optional[float] = Query(None, alias="priceMin"),
    price_max: Optional[float] = Query(None, alias="priceMax"),
    city: Optional[str] = None,
    state: Optional[str] = None,
    bedrooms_min: Optional[int] = Query(None, alias="bedroomsMin"),
    bedrooms_max: Optional[int] = Query(None, alias="bedroomsMax"),
    bathrooms_min: Optional[int] = Query(None, alias="bathroomsMin"),
    bathrooms_max: Optional[int] = Query(None, alias="bathroomsMax"),
    area_min: Optional[float] = Query(None, alias="areaMin"),
    area_max: Optional[float] = Query(None, alias="areaMax"),
    parking_spaces_min: Optional[int] = Query(None, alias="parkingSpacesMin"),
    amenities: Optional[str] = Query(None, description="Lista separada por vírgula"),
    page: Optional[int] = None,
    limit: Optional[int] = Query(None, description="Padrão 20, máximo 100"),
    sort_by: Optional[Literal["price", "createdAt", "views", "favorites", "area"]] = Query(None, alias="sortBy"),
    sort_order: Optional[Literal["asc", "desc"]] = Query(None, alias="sortOrder"),
    status: Optional[str] = None,
    service: PropertySearchService = Depends(get_search_service),
):
    """
    Busca imóveis com filtros compostos.

    Sem status explícito, só retorna imóveis AVAILABLE.
    Falha no banco -> 500 (tratado pelo handler de SearchFailure).
    """
    logger.info(
        "Requisição de busca recebida",
        extra={"context": {
            "query": dict(request.query_params),
            "ip": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
        }},
    )

    params = SearchParams(
        type=type,
        price_min=price_min,
        price_max=price_max,
        city=city,
        state=state,
        bedrooms_min=bedrooms_min,
        bedrooms_max=bedrooms_max,
        bathrooms_min=bathrooms_min,
        bathrooms_max=bathrooms_max,
        area_min=area_min,
        area_max=area_max,
        parking_spaces_min=parking_spaces_min,
        amenities=_split_csv(amenities),
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        status=status,
    )

    result = await service.search(params)

    return SearchResponse(
        data=SearchData(
            properties=[PropertySearchItem.model_validate(p) for p in result.properties],
            pagination=PaginationSchema.model_validate(result.pagination),
            filters=result.filters,
            execution_time_ms=result.execution_time_ms,
        )
    )


# =============================================================================
# CONSULTAS AUXILIARES
# =============================================================================

@router.get("/types", response_model=TypesResponse)
@limiter.shared_limit(search_rate_limit, scope="search")
async def get_property_types(
    request: Request,
    response: Response,
    service: PropertySearchService = Depends(get_search_service),
):
    """Tipos únicos: ["HOUSE", "APARTMENT", ...]"""
    types = await service.get_available_property_types()
    return TypesResponse(data=TypesData(types=types))


@router.get("/price-range", response_model=PriceRangeResponse)
@limiter.shared_limit(search_rate_limit, scope="search")
async def get_price_range(
    request: Request,
    response: Response,
    type: Optional[str] = Query(None, description="HOUSE, APARTMENT, Casa, Apartamento..."),
    service: PropertySearchService = Depends(get_search_service),
):
    """
    Faixa de preços para sliders.

    Sem imóveis: {min: 0, max: 1000000}
    """
    price_range = await service.get_price_range(type)
    return PriceRangeResponse(data=PriceRangeData(min=price_range.min, max=price_range.max))


@router.get("/cities", response_model=CitiesResponse)
@limiter.shared_limit(search_rate_limit, scope="search")
async def get_cities(
    request: Request,
    response: Response,
    service: PropertySearchService = Depends(get_search_service),
):
    """Cidades únicas em ordem alfabética: ["Aparecida de Goiânia", "Goiânia", ...]"""
    cities = await service.get_available_cities()
    return CitiesResponse(data=CitiesData(cities=cities))
