"""
NORMALIZAÇÃO DOS PARÂMETROS DE BUSCA
=====================================

Converte o conjunto de parâmetros recebido pela rota (tudo opcional, ainda
"cru") em:

1. Janela de paginação limitada (page >= 1, 1 <= limit <= 100)
2. Ordenação determinística (campo + direção)
3. Predicado conjuntivo (SearchPredicate) que o repositório traduz para SQL

Regras importantes:
- status = AVAILABLE por padrão (visibilidade pública), exceto se o
  chamador informar outro status explicitamente
- Tipo do imóvel passa pela tabela de sinônimos (CASA -> HOUSE, ...).
  Tokens desconhecidos seguem em maiúsculas, sem validação
- Preço mínimo/máximo <= 0 é tratado como "não informado"
- Não há validação cruzada min <= max: intervalo invertido só retorna vazio
"""

from dataclasses import dataclass, field, asdict
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from imoveis.domain.entities.enums import PropertyStatus, PropertyType


PAGE_SIZE_CAP = 100

SORT_FIELDS = ("price", "createdAt", "views", "favorites", "area")
SORT_ORDERS = ("asc", "desc")

# Termos em português (e variações) -> valor canônico do banco
PROPERTY_TYPE_SYNONYMS: Mapping[str, str] = MappingProxyType({
    "CASA": PropertyType.HOUSE.value,
    "APARTAMENTO": PropertyType.APARTMENT.value,
    "TERRENO": PropertyType.LAND.value,
    "COMERCIAL": PropertyType.COMMERCIAL.value,
    "CONDOMINIO": PropertyType.CONDO.value,
    "CONDOMÍNIO": PropertyType.CONDO.value,
})


@dataclass(frozen=True)
class SearchConfig:
    """
    Configuração imutável da busca, montada uma vez e injetada no serviço.
    """

    default_page_size: int = 20
    max_page_size: int = 100
    default_sort_by: str = "createdAt"
    default_sort_order: str = "desc"
    default_status: str = PropertyStatus.AVAILABLE.value
    type_synonyms: Mapping[str, str] = field(default_factory=lambda: PROPERTY_TYPE_SYNONYMS)
    price_range_fallback: Tuple[float, float] = (0, 1000000)

    def __post_init__(self):
        if not 1 <= self.max_page_size <= PAGE_SIZE_CAP:
            raise ValueError(f"max_page_size deve estar entre 1 e {PAGE_SIZE_CAP}: {self.max_page_size}")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError(
                f"default_page_size deve estar entre 1 e {self.max_page_size}: {self.default_page_size}"
            )

    @classmethod
    def from_settings(cls, settings) -> "SearchConfig":
        return cls(
            default_page_size=settings.search_default_page_size,
            max_page_size=settings.search_max_page_size,
        )


@dataclass
class SearchParams:
    """Parâmetros de busca como chegam da rota (todos opcionais)."""

    # Filtros básicos
    type: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None

    # Localização
    city: Optional[str] = None
    state: Optional[str] = None

    # Características
    bedrooms_min: Optional[int] = None
    bedrooms_max: Optional[int] = None
    bathrooms_min: Optional[int] = None
    bathrooms_max: Optional[int] = None
    area_min: Optional[float] = None
    area_max: Optional[float] = None
    parking_spaces_min: Optional[int] = None

    # Amenidades (o imóvel precisa ter TODAS)
    amenities: Optional[List[str]] = None

    # Paginação e ordenação
    page: Optional[int] = None
    limit: Optional[int] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None

    status: Optional[str] = None


@dataclass(frozen=True)
class SearchPredicate:
    """Filtro conjuntivo já normalizado. Campos None não restringem nada."""

    status: str
    property_type: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    city: Optional[str] = None
    state: Optional[str] = None
    bedrooms_min: Optional[int] = None
    bedrooms_max: Optional[int] = None
    bathrooms_min: Optional[int] = None
    bathrooms_max: Optional[int] = None
    area_min: Optional[float] = None
    area_max: Optional[float] = None
    parking_spaces_min: Optional[int] = None
    amenities: Tuple[str, ...] = ()

    def applied_filters(self) -> Dict[str, Any]:
        """Somente os filtros efetivamente aplicados."""
        filters = {}
        for key, value in asdict(self).items():
            if value is None or value == ():
                continue
            filters[key] = list(value) if isinstance(value, tuple) else value
        return filters


@dataclass(frozen=True)
class NormalizedSearchParams:
    """Paginação, ordenação e predicado prontos para o repositório."""

    page: int
    limit: int
    sort_by: str
    sort_order: str
    predicate: SearchPredicate

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def echo(self) -> Dict[str, Any]:
        """Filtros aplicados + ordenação, devolvidos junto com o resultado."""
        filters = self.predicate.applied_filters()
        filters["sort_by"] = self.sort_by
        filters["sort_order"] = self.sort_order
        return filters


def normalize_property_type(token: str, synonyms: Mapping[str, str] = PROPERTY_TYPE_SYNONYMS) -> str:
    """
    Normaliza o tipo informado pelo cliente.

    "casa" e "CASA" -> "HOUSE"; "apartamento" -> "APARTMENT".
    Tokens fora da tabela voltam em maiúsculas, sem alteração.
    """
    upper = token.upper()
    return synonyms.get(upper, upper)


def _positive(value: Optional[float]) -> Optional[float]:
    if value is not None and value > 0:
        return value
    return None


def _text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _amenities(values: Optional[List[str]]) -> Tuple[str, ...]:
    if not values:
        return ()
    cleaned = []
    for value in values:
        value = value.strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return tuple(cleaned)


def normalize_search_params(params: SearchParams, config: SearchConfig) -> NormalizedSearchParams:
    """Aplica padrões e limites e monta o predicado da busca."""
    page = params.page if params.page is not None else 1
    page = max(1, page)

    limit = params.limit if params.limit is not None else config.default_page_size
    limit = min(config.max_page_size, max(1, limit))

    sort_by = params.sort_by if params.sort_by in SORT_FIELDS else config.default_sort_by
    sort_order = params.sort_order if params.sort_order in SORT_ORDERS else config.default_sort_order

    property_type = None
    if params.type:
        property_type = normalize_property_type(params.type, config.type_synonyms)

    predicate = SearchPredicate(
        status=params.status or config.default_status,
        property_type=property_type,
        price_min=_positive(params.price_min),
        price_max=_positive(params.price_max),
        city=_text(params.city),
        state=_text(params.state),
        bedrooms_min=params.bedrooms_min,
        bedrooms_max=params.bedrooms_max,
        bathrooms_min=params.bathrooms_min,
        bathrooms_max=params.bathrooms_max,
        area_min=params.area_min,
        area_max=params.area_max,
        parking_spaces_min=params.parking_spaces_min,
        amenities=_amenities(params.amenities),
    )

    return NormalizedSearchParams(
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        predicate=predicate,
    )
